from __future__ import annotations

import argparse
import random
import tkinter as tk
from tkinter import messagebox
from typing import List, Optional, Tuple

from bfsgrid.asciimap import random_walls
from bfsgrid.grid import GridError, Position
from bfsgrid.playback import PlaybackConfig, RevealEvent, RevealKind, reveal_schedule
from bfsgrid.session import EditOutcome, EditSession

BG = "#0f172a"
FG = "#e2e8f0"
CELL_EMPTY = "#1f2937"
CELL_WALL = "#475569"
CELL_START = "#22c55e"
CELL_END = "#ef4444"
CELL_VISITED = "#38bdf8"
CELL_PATH = "#eab308"


class BfsApp:
    """Tkinter board for placing start/end/walls and watching the BFS unfold."""

    def __init__(self, config: Optional[PlaybackConfig] = None) -> None:
        self.config = config or PlaybackConfig()
        self.session = EditSession(self.config.height, self.config.width)
        self.root = tk.Tk()
        self.root.title("BFS Visualizer")
        self.root.configure(bg=BG)

        self.cell_px = 32
        self.wall_prob_var = tk.DoubleVar(value=0.25)
        self.seed_var = tk.StringVar(value="")  # blank => random seed

        self.dragging = False
        self._last_drag: Optional[Position] = None
        self.after_handles: List[str] = []
        self.rects: dict = {}

        self._build_layout()
        self._draw_board()

    def _build_layout(self) -> None:
        header = tk.Label(self.root, text="BFS Visualizer", font=("Segoe UI", 18, "bold"), fg=FG, bg=BG)
        header.pack(pady=(12, 6))

        controls = tk.Frame(self.root, bg=BG)
        controls.pack(fill="x", padx=12)

        specs = [
            ("Solve", self.solve, "#22c55e", "#0b1720"),
            ("Reset", self.reset, "#334155", FG),
            ("Random walls", self.randomize, "#1d4ed8", FG),
            ("New grid", self.prompt_new_grid, "#1d4ed8", FG),
        ]
        for i, (label, command, bg, fg) in enumerate(specs):
            tk.Button(controls, text=label, command=command, bg=bg, fg=fg, relief="flat", padx=12, pady=6).grid(
                row=0, column=i, sticky="we", padx=4
            )
            controls.columnconfigure(i, weight=1)

        body = tk.Frame(self.root, bg=BG)
        body.pack(fill="both", expand=True, padx=12, pady=12)

        self.canvas = tk.Canvas(body, bg="#0b1220", highlightthickness=0)
        self.canvas.grid(row=0, column=0, sticky="nsew")
        self.canvas.bind("<Button-1>", self._on_press)
        self.canvas.bind("<B1-Motion>", self._on_drag)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)

        info_frame = tk.Frame(body, bg=BG)
        info_frame.grid(row=0, column=1, sticky="new", padx=(12, 0))

        self.status_label = tk.Label(
            info_frame, text="Click to place the start cell.", fg=FG, bg=BG, anchor="w", justify="left"
        )
        self.status_label.pack(fill="x", pady=(0, 6))

        legend = tk.LabelFrame(info_frame, text="Legend", bg=BG, fg=FG)
        legend.pack(fill="x", pady=(6, 6))

        def legend_row(color: str, text: str):
            row = tk.Frame(legend, bg=BG)
            row.pack(fill="x", pady=1)
            swatch = tk.Canvas(row, width=14, height=14, bg=BG, highlightthickness=0)
            swatch.pack(side="left", padx=(4, 6))
            swatch.create_rectangle(2, 2, 12, 12, fill=color, outline=color)
            tk.Label(row, text=text, bg=BG, fg=FG).pack(side="left")

        legend_row(CELL_START, "Start")
        legend_row(CELL_END, "End")
        legend_row(CELL_WALL, "Wall")
        legend_row(CELL_VISITED, "Visited")
        legend_row(CELL_PATH, "Shortest path")

        self.log_text = tk.Text(
            info_frame, height=14, width=34, bg="#111827", fg="#e5e7eb", highlightthickness=0, relief="flat", wrap="word"
        )
        self.log_text.pack(fill="both", expand=True, pady=(6, 0))
        self.log_text.config(state="disabled")

    # ---------- board ----------
    def _draw_board(self) -> None:
        grid = self.session.grid
        self.canvas.config(width=grid.width * self.cell_px, height=grid.height * self.cell_px)
        self.canvas.delete("all")
        self.rects = {}
        for cell in grid.cells():
            x0 = cell.col * self.cell_px
            y0 = cell.row * self.cell_px
            self.rects[cell.pos] = self.canvas.create_rectangle(
                x0, y0, x0 + self.cell_px, y0 + self.cell_px, fill=self._base_color(cell.pos), outline=BG
            )

    def _base_color(self, pos: Position) -> str:
        if pos == self.session.start:
            return CELL_START
        if pos == self.session.end:
            return CELL_END
        return CELL_WALL if self.session.grid[pos].is_wall else CELL_EMPTY

    def _paint(self, pos: Position, color: str) -> None:
        self.canvas.itemconfig(self.rects[pos], fill=color)

    def _cell_at(self, event) -> Optional[Tuple[int, int]]:
        row, col = event.y // self.cell_px, event.x // self.cell_px
        if not self.session.grid.in_bounds(row, col):
            return None
        return (row, col)

    # ---------- editing ----------
    def _on_press(self, event) -> None:
        pos = self._cell_at(event)
        if pos is None:
            return
        self.dragging = True
        self._apply(pos, self.session.click(*pos))
        self._last_drag = pos

    def _on_drag(self, event) -> None:
        pos = self._cell_at(event)
        if not self.dragging or pos is None or pos == self._last_drag:
            return
        self._last_drag = pos
        self._apply(pos, self.session.drag(*pos))

    def _on_release(self, _event) -> None:
        self.dragging = False
        self._last_drag = None

    def _apply(self, pos: Position, outcome: EditOutcome) -> None:
        if outcome is EditOutcome.REJECTED:
            return
        self._paint(pos, self._base_color(pos))
        if outcome is EditOutcome.START_SET:
            self._set_status("Click to place the end cell.")
        elif outcome is EditOutcome.END_SET:
            self._set_status("Click or drag to toggle walls, then Solve.")

    # ---------- actions ----------
    def solve(self) -> None:
        if self.session.locked:
            return
        try:
            result = self.session.solve()
        except GridError as exc:
            messagebox.showerror("Cannot solve", str(exc))
            return

        self._clear_overlay()
        self.session.locked = True
        summary = result.summary()
        self._log(f"Visited {summary['visited']} cells, status={summary['status']}.")
        if result.end_reached:
            self._log(f"Shortest path: {summary['path_len']} cells.")
        for event in reveal_schedule(result, self.config):
            self.after_handles.append(self.root.after(event.at_ms, self._reveal, event))

    def _reveal(self, event: RevealEvent) -> None:
        if event.kind is RevealKind.UNREACHABLE:
            self._finish("End is unreachable.")
            messagebox.showinfo("No path", "End is unreachable")
            return
        if not event.marker:
            self._paint(event.pos, CELL_VISITED if event.kind is RevealKind.VISITED else CELL_PATH)
        if event.kind is RevealKind.PATH and event.pos == self.session.end:
            self._finish("Done. Reset to start over.")

    def _finish(self, status: str) -> None:
        self.after_handles = []
        self.session.locked = False
        self._set_status(status)

    def _clear_overlay(self) -> None:
        for pos in self.rects:
            self._paint(pos, self._base_color(pos))

    def _cancel_after(self) -> None:
        for handle in self.after_handles:
            self.root.after_cancel(handle)
        self.after_handles = []

    def reset(self) -> None:
        self._cancel_after()
        self.session.reset()
        self._draw_board()
        self._set_status("Click to place the start cell.")
        self._log("Board reset.")

    def _resolve_seed(self) -> int:
        s = self.seed_var.get().strip()
        if s:
            return int(s)
        seed = random.randint(0, 10**9)
        self.seed_var.set(str(seed))
        return seed

    def randomize(self) -> None:
        if self.session.locked:
            return
        try:
            seed = self._resolve_seed()
            random_walls(
                self.session.grid,
                float(self.wall_prob_var.get()),
                random.Random(seed),
                keep=[p for p in (self.session.start, self.session.end) if p is not None],
            )
        except (ValueError, tk.TclError) as exc:
            messagebox.showerror("Invalid input", str(exc))
            return
        self._log(f"Random walls (p={self.wall_prob_var.get():.2f}, seed={seed}).")
        self._draw_board()

    def prompt_new_grid(self) -> None:
        """Ask for grid size, wall density and seed."""
        dlg = tk.Toplevel(self.root)
        dlg.title("New Grid")
        dlg.configure(bg=BG)
        dlg.transient(self.root)
        dlg.grab_set()

        height_var = tk.IntVar(value=self.session.height)
        width_var = tk.IntVar(value=self.session.width)
        fields = [
            ("Rows:", height_var),
            ("Columns:", width_var),
            ("Wall probability (random walls):", self.wall_prob_var),
            ("Seed (blank = random):", self.seed_var),
        ]
        for label, var in fields:
            tk.Label(dlg, text=label, bg=BG, fg=FG).pack(anchor="w", padx=12, pady=(10, 2))
            tk.Entry(dlg, textvariable=var, bg="#111827", fg="#e5e7eb", insertbackground="#e5e7eb").pack(
                fill="x", padx=12
            )

        btns = tk.Frame(dlg, bg=BG)
        btns.pack(fill="x", padx=12, pady=12)

        def on_create():
            try:
                session = EditSession(int(height_var.get()), int(width_var.get()))
            except (GridError, ValueError, tk.TclError) as exc:
                messagebox.showerror("Invalid grid size", str(exc), parent=dlg)
                return
            dlg.destroy()
            self._cancel_after()
            self.session = session
            self._draw_board()
            self._set_status("Click to place the start cell.")
            self._log(f"New {session.height}x{session.width} grid.")

        tk.Button(btns, text="Cancel", command=dlg.destroy, bg="#334155", fg=FG, relief="flat").pack(side="right", padx=6)
        tk.Button(btns, text="Create", command=on_create, bg="#22c55e", fg="#0b1720", relief="flat").pack(side="right")

    def _set_status(self, text: str) -> None:
        self.status_label.config(text=text)

    def _log(self, message: str) -> None:
        self.log_text.config(state="normal")
        self.log_text.insert("end", message + "\n")
        self.log_text.see("end")
        self.log_text.config(state="disabled")

    def run(self) -> None:
        self.root.mainloop()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Interactive BFS grid visualizer.")
    parser.add_argument("--height", type=int, default=12)
    parser.add_argument("--width", type=int, default=20)
    parser.add_argument("--visited-delay", type=int, default=35, help="ms between visited cells")
    parser.add_argument("--path-delay", type=int, default=50, help="ms between path cells")
    args = parser.parse_args(argv)
    config = PlaybackConfig(
        height=args.height, width=args.width, visited_delay_ms=args.visited_delay, path_delay_ms=args.path_delay
    )
    try:
        app = BfsApp(config)
    except GridError as exc:
        parser.error(str(exc))
    app.run()


if __name__ == "__main__":
    main()
