"""tkinter window: layout, TodoView implementation and effect wiring.

Layout (top to bottom): title, input row (entry + Add), task list, button
row (Mark Completed / Remove), Remove Completed. A canvas placed behind
everything hosts the rising bubbles.

tk has no per-widget opacity or scale: opacity is simulated by blending
colours towards the background, scale by resizing the widget's font.
"""
from __future__ import annotations
import logging
import random
import tkinter as tk
from tkinter import font as tkfont
from tkinter import simpledialog
from typing import Callable, Dict, List, Optional, Sequence, Tuple
import effects
from animation import Animator
from config import Settings
from controller import ADD, MARK, REMOVE, REMOVE_COMPLETED, TodoListController
from models import Task
from theme import (BODY_SIZE, BUTTON_SIZE, FONT_FAMILY, TITLE_SIZE, Palette,
                   blend, fade, task_label)

logger = logging.getLogger(__name__)

PAD = 12
BUTTON_HOVER_SCALE = 1.1
PARTICLE_COLOR = '#FFFFFF'
PARTICLE_ALPHA = 0.4


class _ScalableButton:
    """A tk.Button plus its own font, so scaling one button leaves the others alone."""

    def __init__(self, master: tk.Misc, text: str, palette: Palette, command):
        self.font = tkfont.Font(family=FONT_FAMILY, size=BUTTON_SIZE, weight='bold')
        self.palette = palette
        self.scale = 1.0
        self.hover_job: Optional[int] = None
        self.widget = tk.Button(
            master, text=text, font=self.font, command=command,
            bg=palette.primary, fg=palette.text,
            activebackground=palette.accent, activeforeground=palette.text,
            relief=tk.FLAT, bd=0, padx=14, pady=6, cursor='hand2',
        )

    def set_scale(self, scale: float) -> None:
        self.scale = scale
        self.font.configure(size=max(1, int(round(BUTTON_SIZE * scale))))

    def set_opacity(self, opacity: float) -> None:
        self.widget.configure(bg=fade(self.palette.primary, self.palette.bg, opacity),
                              fg=fade(self.palette.text, self.palette.bg, opacity))


class _BubbleSprite:
    """Canvas oval driven by a Bubble's rise / fade / scale setters."""

    def __init__(self, canvas: tk.Canvas, bubble: effects.Bubble, background: str):
        self.canvas = canvas
        self.bubble = bubble
        self.background = background
        self.offset = 0.0
        self.scale = 1.0
        self.item = canvas.create_oval(0, 0, 0, 0, outline='', fill=self._color(bubble.start_opacity))
        self._redraw()

    def _color(self, opacity: float) -> str:
        return fade(PARTICLE_COLOR, self.background, opacity * PARTICLE_ALPHA)

    def _redraw(self) -> None:
        r = self.bubble.radius * self.scale
        cx, cy = self.bubble.x, self.bubble.y + self.offset
        self.canvas.coords(self.item, cx - r, cy - r, cx + r, cy + r)

    def set_offset(self, value: float) -> None:
        self.offset = value
        self._redraw()

    def set_scale(self, value: float) -> None:
        self.scale = value
        self._redraw()

    def set_opacity(self, value: float) -> None:
        self.canvas.itemconfigure(self.item, fill=self._color(value))

    def destroy(self) -> None:
        self.canvas.delete(self.item)


class TodoWindow:
    def __init__(self, settings: Settings, palette: Optional[Palette] = None,
                 rng: Optional[random.Random] = None):
        self.settings = settings
        self.palette = palette or Palette.load()
        self.rng = rng or random.Random()
        self.controller: Optional[TodoListController] = None
        self._rows: List[Task] = []
        self._hover_row: Optional[int] = None
        self._closing = False
        self._particle_job: Optional[str] = None

        self.root = tk.Tk()
        self.root.title(settings.title)
        self.root.geometry(settings.geometry)
        self.root.minsize(420, 360)
        self.root.configure(bg=self.palette.bg)
        self.animator = Animator(self.root, enabled=settings.animations)
        self._build_ui()

    # -------------------- layout --------------------
    def _build_ui(self) -> None:
        p = self.palette
        self.canvas = tk.Canvas(self.root, bg=p.bg, highlightthickness=0, bd=0)
        self.canvas.place(relx=0, rely=0, relwidth=1, relheight=1)

        self.title_font = tkfont.Font(family=FONT_FAMILY, size=TITLE_SIZE, weight='bold')
        self.body_font = tkfont.Font(family=FONT_FAMILY, size=BODY_SIZE)
        self.title_label = tk.Label(self.root, text=self.settings.title, font=self.title_font,
                                    bg=p.bg, fg=p.accent)
        self.title_label.pack(side=tk.TOP, pady=(PAD * 2, PAD))

        self.input_box = tk.Frame(self.root, bg=p.bg)
        self.input_box.pack(side=tk.TOP, fill=tk.X, padx=PAD * 2, pady=(0, PAD))
        self.task_input = tk.Entry(self.input_box, font=self.body_font, bg=p.text, fg=p.bg,
                                   insertbackground=p.bg, relief=tk.FLAT)
        self.task_input.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=(0, PAD), ipady=6)
        self.add_button = _ScalableButton(self.input_box, 'Add', p, self._on_add)
        self.add_button.widget.pack(side=tk.RIGHT)

        # packed bottom-up so the list takes the remaining space
        self.remove_completed_button = _ScalableButton(self.root, 'Remove Completed', p,
                                                       self._on_remove_completed)
        self.remove_completed_button.widget.pack(side=tk.BOTTOM, pady=(0, PAD * 2))
        self.control_buttons_box = tk.Frame(self.root, bg=p.bg)
        self.control_buttons_box.pack(side=tk.BOTTOM, pady=(0, PAD))
        self.mark_completed_button = _ScalableButton(self.control_buttons_box, 'Mark Completed', p,
                                                     self._on_mark)
        self.mark_completed_button.widget.pack(side=tk.LEFT, padx=PAD // 2)
        self.remove_task_button = _ScalableButton(self.control_buttons_box, 'Remove', p,
                                                  self._on_remove)
        self.remove_task_button.widget.pack(side=tk.LEFT, padx=PAD // 2)

        list_frame = tk.Frame(self.root, bg=p.bg)
        list_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=PAD * 2, pady=(0, PAD))
        scrollbar = tk.Scrollbar(list_frame, orient=tk.VERTICAL)
        self._list_bg = blend(p.bg, p.text, 0.08)
        self.task_list = tk.Listbox(
            list_frame, font=self.body_font, activestyle='none', relief=tk.FLAT,
            bg=self._list_bg, fg=p.text, selectbackground=p.primary,
            selectforeground=p.text, highlightthickness=0, exportselection=False,
            yscrollcommand=scrollbar.set,
        )
        scrollbar.configure(command=self.task_list.yview)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.task_list.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        tk.Misc.lower(self.canvas)  # Canvas.lower is tag_lower

        self.buttons: Dict[str, _ScalableButton] = {
            ADD: self.add_button,
            MARK: self.mark_completed_button,
            REMOVE: self.remove_task_button,
            REMOVE_COMPLETED: self.remove_completed_button,
        }

    def bind_controller(self, controller: TodoListController) -> None:
        self.controller = controller
        self.task_input.bind('<Return>', lambda _e: self._on_add())
        self.task_list.bind('<Double-Button-1>', self._on_double_click)
        self.task_list.bind('<Delete>', lambda _e: self._on_remove())
        self.task_list.bind('<F2>', lambda _e: self._on_edit())
        self.task_input.bind('<F2>', lambda _e: self._on_edit())
        self.task_list.bind('<Motion>', self._on_list_motion)
        self.task_list.bind('<Leave>', lambda _e: self._set_hover_row(None))
        self.root.protocol('WM_DELETE_WINDOW', self._on_close)

    # -------------------- TodoView --------------------
    def input_text(self) -> Optional[str]:
        return self.task_input.get()

    def clear_input(self) -> None:
        self.task_input.delete(0, tk.END)

    def selected_task(self) -> Optional[Task]:
        selection = self.task_list.curselection()
        if not selection:
            return None
        idx = selection[0]
        return self._rows[idx] if idx < len(self._rows) else None

    def clear_selection(self) -> None:
        self.task_list.selection_clear(0, tk.END)

    def show_tasks(self, tasks: Sequence[Task]) -> None:
        selected = self.selected_task()
        self._rows = list(tasks)
        self._hover_row = None
        self.task_list.delete(0, tk.END)
        for idx, task in enumerate(self._rows):
            self.task_list.insert(tk.END, task_label(task.description, task.completed))
            if task.completed:
                self.task_list.itemconfigure(idx, foreground=self.palette.done_text,
                                             selectforeground=self.palette.done)
        if selected is not None and selected in self._rows:
            self.task_list.selection_set(self._rows.index(selected))

    def scroll_to(self, task: Task) -> None:
        if task in self._rows:
            self.task_list.see(self._rows.index(task))

    def animate_click(self, button: str) -> None:
        target = self.buttons.get(button)
        if target is not None:
            self.animator.play(effects.click(target.set_scale))

    def shake_input(self) -> None:
        def set_offset(value: float) -> None:
            self.task_input.pack_configure(padx=(int(round(value)), PAD))
        self.animator.play(effects.shake(set_offset))

    def prompt_edit(self, task: Task) -> Optional[str]:
        return simpledialog.askstring('Edit task', 'Description:',
                                      initialvalue=task.description, parent=self.root)

    # -------------------- event glue --------------------
    def _on_add(self) -> None:
        if self.controller:
            self.controller.handle_add_task()

    def _on_mark(self) -> None:
        if self.controller:
            self.controller.handle_mark_as_completed()

    def _on_remove(self) -> None:
        if self.controller:
            self.controller.handle_remove_task()

    def _on_remove_completed(self) -> None:
        if self.controller:
            self.controller.handle_remove_completed_tasks()

    def _on_edit(self) -> None:
        if self.controller:
            self.controller.handle_edit_task()

    def _on_double_click(self, event: tk.Event) -> None:
        if not self.controller or not self._rows:
            return
        idx = self.task_list.nearest(event.y)
        if 0 <= idx < len(self._rows):
            self.controller.handle_toggle(self._rows[idx])

    def _on_list_motion(self, event: tk.Event) -> None:
        idx = self.task_list.nearest(event.y) if self._rows else None
        self._set_hover_row(idx)

    def _set_hover_row(self, idx: Optional[int]) -> None:
        if idx == self._hover_row:
            return
        if self._hover_row is not None and self._hover_row < len(self._rows):
            self.task_list.itemconfigure(self._hover_row, background=self._list_bg)
        self._hover_row = idx
        if idx is not None and idx < len(self._rows):
            self.task_list.itemconfigure(idx, background=self.palette.hover_row)

    # -------------------- effects --------------------
    def start_effects(self) -> None:
        """Entrance animations, hover scaling, title glow and particles."""
        self.animator.play(effects.title_glow(self._set_glow))
        self._fade_in(self.input_box, (0, PAD), [self.add_button], self._entry_opacity, 500)
        self._fade_in(self.control_buttons_box, (0, PAD),
                      [self.mark_completed_button, self.remove_task_button], None, 700)
        self._fade_in(self.remove_completed_button.widget, (0, PAD * 2),
                      [self.remove_completed_button], None, 900)
        for button in self.buttons.values():
            self._add_hover_effect(button)
        self.animator.play(effects.pulse(self.add_button.set_scale, 1000))
        if self.settings.particles:
            self._particle_job = self.root.after(effects.PARTICLE_INTERVAL_MS, self._spawn_particles)

    def _set_glow(self, level: float) -> None:
        self.title_label.configure(fg=blend(self.palette.accent, self.palette.glow, level))

    def _entry_opacity(self, opacity: float) -> None:
        p = self.palette
        self.task_input.configure(bg=fade(p.text, p.bg, opacity))

    def _fade_in(self, widget: tk.Widget, pady: Tuple[int, int], buttons: Sequence[_ScalableButton],
                 extra: Optional[Callable[[float], None]], delay_ms: int, slide: float = 20.0) -> None:
        """Slide the widget up by shifting its vertical pack padding (pady is its resting value)."""
        top, bottom = pady

        def set_opacity(value: float) -> None:
            for b in buttons:
                b.set_opacity(value)
            if extra is not None:
                extra(value)

        def set_offset(value: float) -> None:
            shift = int(round(value))
            widget.pack_configure(pady=(top + shift, max(0, bottom - shift)))

        set_opacity(0.0)
        set_offset(slide)
        self.animator.play(effects.fade_in_and_slide(set_opacity, set_offset, delay_ms, slide))

    def _add_hover_effect(self, button: _ScalableButton) -> None:
        def enter(_event: tk.Event) -> None:
            self.animator.stop(button.hover_job)
            button.hover_job = self.animator.play(
                effects.hover(button.set_scale, BUTTON_HOVER_SCALE, button.scale))

        def leave(_event: tk.Event) -> None:
            self.animator.stop(button.hover_job)
            button.hover_job = self.animator.play(
                effects.unhover(button.set_scale, 1.0, button.scale))

        button.widget.bind('<Enter>', enter, add='+')
        button.widget.bind('<Leave>', leave, add='+')

    def _spawn_particles(self) -> None:
        self._particle_job = None
        if self._closing:
            return
        width, height = self.canvas.winfo_width(), self.canvas.winfo_height()
        for bubble in effects.spawn_bubbles(self.rng, width, height):
            sprite = _BubbleSprite(self.canvas, bubble, self.palette.bg)
            self.animator.play(bubble.animation(sprite.set_offset, sprite.set_opacity, sprite.set_scale),
                               on_finished=sprite.destroy)
        self._particle_job = self.root.after(effects.PARTICLE_INTERVAL_MS, self._spawn_particles)

    # -------------------- lifecycle --------------------
    def _on_close(self) -> None:
        if self._closing:
            return
        self._closing = True
        logger.info("Closing window")
        if self._particle_job is not None:
            self.root.after_cancel(self._particle_job)
            self._particle_job = None
        self.animator.stop_all()
        self.root.update_idletasks()
        w0, h0 = self.root.winfo_width(), self.root.winfo_height()
        x0, y0 = self.root.winfo_x(), self.root.winfo_y()

        def set_alpha(value: float) -> None:
            self.root.attributes('-alpha', max(0.0, value))

        def set_scale(value: float) -> None:
            w, h = max(1, int(w0 * value)), max(1, int(h0 * value))
            self.root.geometry(f"{w}x{h}+{x0 + (w0 - w) // 2}+{y0 + (h0 - h) // 2}")

        self.animator.play(effects.exit_animation(set_alpha, set_scale), on_finished=self._destroy)

    def _destroy(self) -> None:
        if self.controller is not None:
            self.controller.close()
        self.root.destroy()

    def run(self) -> None:
        logger.info("Opening window %s (%s)", self.settings.title, self.settings.geometry)
        self.root.mainloop()
