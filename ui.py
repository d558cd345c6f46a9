"""
TicTacToe UI
A graphical interface for two players using Tkinter.

Shows:
- The board (click a cell to play)
- Game status and whose turn it is
- Move history
"""

import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import List, Optional

# Logic imports
from logic.config import GameConfig
from logic.game_state import GameEngine
from logic.move_validator import TileOccupied, GameOver

# Display imports
from display.config import DisplayConfig
from display.renderer import BoardRenderer


class GameSession:
    """
    The game behind the window, without any Tk widgets.

    Turns clicks on the board image into moves and
    builds the text shown in the status panel.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None
    ):
        self.config = config or GameConfig()
        self.renderer = BoardRenderer(display_config)
        self.engine = GameEngine(self.config)

    def reset(self):
        """Start a new game."""
        print("Resetting game...")
        self.engine = GameEngine(self.config)

    def handle_click(self, x: int, y: int) -> str:
        """
        Play the cell under a click for the current player.

        Args:
            x, y: Pixel position on the board image.

        Returns:
            The status text to show after the click.
        """
        coord = self.renderer.cell_at(x, y)
        if coord is None:
            return self.status_text()

        player = self.engine.current_turn
        try:
            self.engine.play_next(coord)
        except TileOccupied as e:
            return self.status_text(f"{e.mark} is already in that spot!")
        except GameOver:
            return self.status_text("Game is already over! Press Reset.")

        print(f"{player} played {coord}")
        return self.status_text()

    def status_text(self, message: Optional[str] = None) -> str:
        result = self.engine.cached_result
        if result is not None:
            return f"🏆 {result}" + (f" ({message})" if message else "")
        return message or "Game in progress"

    def turn_text(self) -> str:
        if self.engine.is_game_over:
            return "Game Over"
        return f"Turn: {self.engine.current_turn}"

    def history_lines(self) -> List[str]:
        return [
            f"{number}. {move.mark} → {move.coord}"
            for number, move in enumerate(self.engine.history, start=1)
        ]

    def board_image(self) -> Image.Image:
        return self.renderer.render_image(self.engine.board, self.engine.winning_line())


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None
    ):
        """Initialize the UI."""
        self.session = GameSession(config, display_config)

        # Keeps the Tk image alive while it is on the canvas
        self._photo: Optional[ImageTk.PhotoImage] = None

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        # Left panel - Board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, padx=(0, 10))

        ttk.Label(left_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 5))

        board_px = self.session.renderer.board_size_px
        self.board_canvas = tk.Canvas(
            left_frame,
            width=board_px,
            height=board_px,
            bg='#0f0f1a',
            highlightthickness=0
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_click)

        # Right panel
        right_frame = ttk.Frame(main_frame, width=260)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        # Game status section
        ttk.Label(right_frame, text="📊 Game Status", style='Title.TLabel').pack()

        self.status_label = ttk.Label(right_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.turn_label = ttk.Label(right_frame, text="Turn: -")
        self.turn_label.pack()

        # History section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="📜 Moves", style='Title.TLabel').pack()

        self.history_list = tk.Listbox(
            right_frame,
            height=9,
            bg='#16213e',
            fg='white',
            font=('Segoe UI', 10),
            highlightthickness=0
        )
        self.history_list.pack(fill=tk.X, pady=5)

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        control_frame = ttk.Frame(right_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        """Play the clicked cell for the current player."""
        self._refresh(self.session.handle_click(event.x, event.y))

    def _refresh(self, status: Optional[str] = None):
        """Redraw the board and update the labels."""
        self._photo = ImageTk.PhotoImage(self.session.board_image())

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=self._photo)

        self.status_label.configure(text=status or self.session.status_text())
        self.turn_label.configure(text=self.session.turn_text())

        self.history_list.delete(0, tk.END)
        for line in self.session.history_lines():
            self.history_list.insert(tk.END, line)

    def _reset_game(self):
        """Reset the game."""
        self.session.reset()
        self._refresh(self.session.status_text("Game reset!"))

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

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print every move the engine accepts or rejects"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.DEBUG_MODE = args.debug

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(config=config)
    ui.run()


if __name__ == "__main__":
    main()
