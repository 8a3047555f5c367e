class MPEGScanError(Exception): ...


class AcquisitionError(MPEGScanError):
    """The leading bytes of an audio resource could not be obtained."""

    def __init__(self, location: str, message: str):
        super().__init__(f"Failed to read {location}: {message}")
        self.location = location


class ConfigError(MPEGScanError, ValueError): ...
