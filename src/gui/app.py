import tkinter as tk
from tkinter import ttk, filedialog, messagebox
import threading

from mpegscan.config import ScanConfig
from mpegscan.exceptions import AcquisitionError
from mpegscan.log import setup_logging
from mpegscan.scanner import scan_source, summarize

COLUMNS = ("offset", "version", "layer", "bitrate", "rate", "mode", "flags")


class HeaderViewer(tk.Tk):
    def __init__(self, config: ScanConfig = None):
        super().__init__()
        self.title("MPEG Header Scanner")
        self.geometry("880x560")
        self.resizable(True, True)
        self.config_ = config or ScanConfig()

        self.location_var = tk.StringVar()
        self.summary_var = tk.StringVar(value="No stream scanned.")
        self._build()

    def _build(self):
        pad = {"padx": 8, "pady": 6}
        top = ttk.Frame(self); top.pack(fill="x", **pad)

        ttk.Label(top, text="MP3 file or URL:").pack(side=tk.LEFT)
        ttk.Entry(top, textvariable=self.location_var, width=70).pack(side=tk.LEFT, fill="x", expand=True, padx=6)
        ttk.Button(top, text="Browse...", command=self._pick_file).pack(side=tk.LEFT, padx=4)
        self.btn_scan = ttk.Button(top, text="Scan", command=self._scan)
        self.btn_scan.pack(side=tk.LEFT, padx=4)

        self.tree = ttk.Treeview(self, columns=COLUMNS, show="headings")
        for col in COLUMNS:
            self.tree.heading(col, text=col.capitalize())
            self.tree.column(col, width=110, anchor="w")
        self.tree.pack(fill=tk.BOTH, expand=True, **pad)

        ttk.Label(self, textvariable=self.summary_var).pack(fill="x", **pad)

    def _pick_file(self):
        p = filedialog.askopenfilename(title="Select MP3", filetypes=[("MP3 files", "*.mp3"), ("All files", "*.*")])
        if p: self.location_var.set(p)

    def _show(self, headers):
        self.tree.delete(*self.tree.get_children())
        for h in headers:
            flags = " ".join(name for name, on in (("prot", h.protected), ("pad", h.padding), ("priv", h.private)) if on)
            self.tree.insert("", tk.END, values=(
                h.bit_offset, str(h.mpeg_version), str(h.layer), str(h.bitrate),
                h.sampling_rate_hz, h.channel_mode.label, flags,
            ))
        info = summarize(headers)
        if info is None:
            self.summary_var.set("No valid headers found.")
        else:
            self.summary_var.set(
                f"{info['total_headers']} header(s): MPEG-{info['mpeg_version']:g} Layer {info['layer']} "
                f"{info['sampling_rate_hz']} Hz {info['channel_mode']}, bitrates {info['distinct_bitrates']}"
            )
        self.btn_scan.state(["!disabled"])

    def _fail(self, msg: str):
        messagebox.showerror("Scan", msg)
        self.btn_scan.state(["!disabled"])

    def _scan(self):
        location = self.location_var.get().strip()
        if not location:
            messagebox.showwarning("Missing", "Please choose an MP3 file or enter a URL."); return
        self.btn_scan.state(["disabled"])
        self.summary_var.set("Scanning...")

        def task():
            try:
                headers = scan_source(location, self.config_)
            except AcquisitionError as e:
                error_msg = str(e)
                self.after(0, lambda msg=error_msg: self._fail(msg))
                return
            self.after(0, lambda: self._show(headers))
        threading.Thread(target=task, daemon=True).start()


def main():
    cfg = ScanConfig.from_env()
    setup_logging(cfg.log_level)
    app = HeaderViewer(cfg); app.mainloop()


if __name__ == "__main__":
    main()
