import customtkinter as ctk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.backend_bases import MouseButton
from typing import Dict, List, Sequence, Tuple
from ..core.models import ExecSlice, Task
from ..exportacion.grafico_gantt import dibujar_gantt

class GanttChart(ctk.CTkFrame):
    """Gantt embebido con zoom (rueda) y desplazamiento horizontal (arrastre)."""

    def __init__(self, master):
        super().__init__(master)

        self._tasks: List[Task] = []
        self._timeline: List[ExecSlice] = []
        self._colors: Dict[int, str] = {}

        self._zoom_factor = 1.2
        self._press_x = None
        self._orig_xlim: Tuple[float, float] = (0.0, 1.0)
        self._full_xlim: Tuple[float, float] = (0.0, 1.0)

        self.figure = Figure(figsize=(10, 4.5), dpi=100)
        self.ax = self.figure.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.figure, master=self)
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        cid = self.canvas.mpl_connect
        cid('button_press_event',   self._on_press)
        cid('button_release_event', self._on_release)
        cid('motion_notify_event',  self._on_motion)
        cid('scroll_event',         self._on_scroll)

    def set_colors(self, color_map: Dict[int, str]):
        self._colors = color_map.copy()

    def clear(self):
        self._tasks = []
        self._timeline = []
        self.ax.clear()
        self.canvas.draw_idle()

    def draw(self, tasks: Sequence[Task], timeline: List[ExecSlice], title: str = ""):
        self._tasks = list(tasks)
        self._timeline = list(timeline)
        self._full_xlim = dibujar_gantt(self.ax, self._tasks, self._timeline, self._colors)
        self.ax.set_title(title)
        self.figure.tight_layout()
        self.canvas.draw_idle()

    # — Mouse handlers —

    def _on_press(self, event):
        if event.inaxes != self.ax or event.button != MouseButton.LEFT:
            return
        self._press_x = event.x
        self._orig_xlim = self.ax.get_xlim()

    def _on_motion(self, event):
        if self._press_x is None or event.inaxes != self.ax or event.x is None:
            return
        x0, x1 = self._orig_xlim
        dx = (event.x - self._press_x) * (x1 - x0) / self.ax.bbox.width
        self.ax.set_xlim(*self._clamp(x0 - dx, x1 - dx))
        self.canvas.draw_idle()

    def _on_release(self, event):
        if event.button == MouseButton.LEFT:
            self._press_x = None

    def _on_scroll(self, event):
        if event.inaxes != self.ax or event.xdata is None:
            return
        factor = (1 / self._zoom_factor) if event.button == 'up' else self._zoom_factor
        l0, r0 = self.ax.get_xlim()
        x = event.xdata
        new_l = x - (x - l0) * factor
        self.ax.set_xlim(*self._clamp(new_l, new_l + (r0 - l0) * factor))
        self.canvas.draw_idle()

    def _clamp(self, low: float, high: float) -> Tuple[float, float]:
        full_low, full_high = self._full_xlim
        span = high - low
        if span >= full_high - full_low:
            return full_low, full_high
        if low < full_low:
            return full_low, full_low + span
        if high > full_high:
            return full_high - span, full_high
        return low, high
