"""
TicTacToe UI
A graphical interface for two players sharing one screen, using Tkinter.

Shows:
- The board, drawn with Pillow (X in blue, O in grey)
- Whose turn it is, or the result
- New game / restart controls
"""

import tkinter as tk
from tkinter import ttk
from PIL import ImageTk
from typing import Optional

# Logic imports
from logic.game_engine import GameEngine
from logic.game_state import GameState
from logic.move_validator import RejectionReason

# Display imports
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer
from display.status import status_text, cell_label, format_board


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The window never changes the game itself: it forwards clicked
    cells to the engine and redraws whatever state comes back.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """Initialize the UI."""
        self.config = config or DisplayConfig()
        self.engine = GameEngine()
        self.renderer = BoardRenderer(self.config)

        # Keep a reference to the board image or Tk drops it
        self._board_photo: Optional[ImageTk.PhotoImage] = None

        self._create_ui()
        self._refresh(self.engine.get_state())

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BACKGROUND_COLOR)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BACKGROUND_COLOR)
        style.configure('Title.TLabel', background=cfg.BACKGROUND_COLOR,
                        foreground=cfg.PRIMARY_COLOR, font=cfg.TITLE_FONT)
        style.configure('Status.TLabel', background=cfg.BACKGROUND_COLOR,
                        foreground=cfg.SECONDARY_COLOR, font=cfg.STATUS_FONT)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=24, pady=24)

        ttk.Label(main_frame, text=cfg.WINDOW_TITLE, style='Title.TLabel').pack(pady=(0, 12))

        # Control buttons
        self.new_game_btn = tk.Button(
            main_frame,
            text=cfg.NEW_GAME_TEXT,
            font=cfg.BUTTON_FONT,
            bg=cfg.PRIMARY_COLOR,
            fg='white',
            activebackground=cfg.PRIMARY_COLOR,
            command=self._reset_game
        )
        self.new_game_btn.pack(pady=(0, 12))

        # Board canvas
        size = self.renderer.size
        self.board_canvas = tk.Canvas(
            main_frame,
            width=size,
            height=size,
            bg=cfg.BACKGROUND_COLOR,
            highlightthickness=0
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_board_click)
        self.board_canvas.bind("<Motion>", self._on_board_motion)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(12, 0))

        # Describes the cell under the pointer
        self.hover_label = ttk.Label(main_frame, text="", style="Status.TLabel")
        self.hover_label.pack()

        # Only shown while the game is over
        self.restart_btn = tk.Button(
            main_frame,
            text=cfg.RESTART_TEXT,
            font=cfg.BUTTON_FONT,
            bg=cfg.ACCENT_COLOR,
            fg=cfg.SECONDARY_COLOR,
            activebackground=cfg.ACCENT_COLOR,
            command=self._reset_game
        )

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_board_click(self, event):
        """Forward a click on a cell to the engine."""
        index = self.renderer.cell_at(event.x, event.y)
        if index is None:
            return

        result = self.engine.apply_move(index)
        if isinstance(result, RejectionReason):
            # Disabled cell; nothing to update
            print(f"Move at cell {index} ignored: {result.value}")
            return

        self._refresh(result)

        if result.is_game_over:
            print(f"\n{format_board(result)}\n{status_text(result)}\n")

    def _on_board_motion(self, event):
        """Show which cells accept a click."""
        index = self.renderer.cell_at(event.x, event.y)
        if index is None:
            self.hover_label.configure(text="")
        else:
            self.hover_label.configure(text=cell_label(self.engine.get_state().board[index]))

        if index is not None and self.engine.is_playable(index):
            self.board_canvas.configure(cursor='hand2')
        else:
            self.board_canvas.configure(cursor='X_cursor')

    def _refresh(self, state: GameState):
        """Redraw the board and labels from a state snapshot."""
        image = self.renderer.render(state, self.engine.winning_line)
        self._board_photo = ImageTk.PhotoImage(image)

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=self._board_photo)

        self.status_label.configure(text=status_text(state))

        if state.is_game_over:
            self.restart_btn.pack(pady=(12, 0))
        else:
            self.restart_btn.pack_forget()

    def _reset_game(self):
        """Reset the game."""
        print("Starting a new game...")
        self._refresh(self.engine.reset())

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe for two players")
    parser.add_argument(
        "--cell-size",
        type=int,
        default=DisplayConfig.CELL_SIZE_PX,
        help="Size of one board cell in pixels"
    )

    args = parser.parse_args()

    try:
        config = DisplayConfig(CELL_SIZE_PX=args.cell_size)
    except ValueError as e:
        parser.error(str(e))

    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60)
    print(f"   Cell size: {config.CELL_SIZE_PX}px")
    print("="*60 + "\n")

    ui = TicTacToeUI(config)
    ui.run()


if __name__ == "__main__":
    main()
