"""
Arcade window: keyboard polling into input commands, draw commands onto screen
"""

from typing import List, Set

import arcade

from .sim import DrawCommand, InputCommand


class SubBoomWindow(arcade.Window):
    """Window driven by an external loop (dispatch_events / show)"""

    MOVE_KEYS = {
        arcade.key.LEFT: InputCommand.MOVE_LEFT,
        arcade.key.A: InputCommand.MOVE_LEFT,
        arcade.key.RIGHT: InputCommand.MOVE_RIGHT,
        arcade.key.D: InputCommand.MOVE_RIGHT,
    }

    def __init__(self, width: int, height: int, title: str = "Sub Boom!"):
        super().__init__(width, height, title)
        self._held: Set[InputCommand] = set()
        self._pending: List[InputCommand] = []
        self._frame: List[DrawCommand] = []

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self._pending.append(InputCommand.QUIT)
        elif symbol == arcade.key.SPACE:
            self._pending.append(InputCommand.DROP_BOMB)
        elif symbol in self.MOVE_KEYS:
            self._held.add(self.MOVE_KEYS[symbol])

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in self.MOVE_KEYS:
            self._held.discard(self.MOVE_KEYS[symbol])

    def on_close(self):
        # the driving loop closes the window once it sees QUIT
        self._pending.append(InputCommand.QUIT)

    def poll_commands(self) -> List[InputCommand]:
        """Commands for this tick: key presses in arrival order, then held moves"""
        commands = self._pending
        self._pending = []
        for command in (InputCommand.MOVE_LEFT, InputCommand.MOVE_RIGHT):
            if command in self._held:
                commands.append(command)
        return commands

    def show(self, commands: List[DrawCommand]):
        self._frame = commands
        self.on_draw()
        self.flip()

    def on_draw(self):
        self.clear()
        # simulation y grows downward, arcade's grows upward
        for (x, y, w, h), color in self._frame:
            arcade.draw_lrbt_rectangle_filled(x, x + w, self.height - y - h, self.height - y, color)
