"""
Arcade renderer and keyboard shell for the bullet hell simulation.

Simulation coordinates have the origin at the top-left, Arcade's at the
bottom-left, so every y is flipped on the way to the screen.

Play:
    python -m game.bullethell.window
"""

from __future__ import annotations

import time

import arcade

from .constants import PLAY_AREA_GROW_SCALE
from .entities import Owner
from .player import Action
from .simulation import FrameLoop, RoundState, Simulation

HUD_HEIGHT = 48

KEY_BINDINGS = {
    arcade.key.W: Action.MOVE_UP,
    arcade.key.A: Action.MOVE_LEFT,
    arcade.key.S: Action.MOVE_DOWN,
    arcade.key.D: Action.MOVE_RIGHT,
    arcade.key.SPACE: Action.FOCUS,
}


class SimulationWindow(arcade.Window):
    """Arcade window that draws the current simulation state"""

    def __init__(self, sim: Simulation, title: str = "Bullet Hell - Arcade"):
        width = int(sim.base_width * PLAY_AREA_GROW_SCALE)
        super().__init__(width, int(sim.height) + HUD_HEIGHT, title)
        self.sim = sim
        self.background_color = (18, 18, 22)

        # Colors
        self.AREA_C = (30, 30, 38)
        self.PLAYER_C = (80, 200, 120)
        self.ENEMY_C = (220, 80, 80)
        self.PLAYER_BULLET_C = (180, 180, 220)
        self.ENEMY_BULLET_C = (240, 150, 60)
        self.HUD_C = (220, 220, 220)

    def _screen_y(self, y: float) -> float:
        return self.sim.height - y

    def _draw_body(self, body, color):
        c = body.center
        arcade.draw_circle_filled(c.x, self._screen_y(c.y), body.radius, color)

    def on_draw(self):
        """Draw the current game state"""
        self.clear()
        sim = self.sim

        arcade.draw_lrbt_rectangle_filled(0, sim.width, 0, sim.height, self.AREA_C)

        self._draw_body(sim.enemy, self.ENEMY_C)

        alpha = 128 if sim.player.invulnerable else 255
        self._draw_body(sim.player, (*self.PLAYER_C, alpha))

        for b in sim.bullets:
            if b.owner is Owner.PLAYER:
                color = (*self.PLAYER_BULLET_C, 128 if b.translucent else 255)
            else:
                color = self.ENEMY_BULLET_C
            self._draw_body(b, color)

        # HUD - boss health bar
        bar_w, bar_h = 180, 10
        x0, y0 = 12, self.height - 22
        arcade.draw_lrbt_rectangle_filled(x0, x0 + bar_w, y0, y0 + bar_h, (60, 60, 60))
        fill = bar_w * sim.enemy.health_fraction
        if fill > 0:
            arcade.draw_lrbt_rectangle_filled(x0, x0 + fill, y0, y0 + bar_h, self.ENEMY_C)

        txt = (f"Lives: {sim.player.lives}  "
               f"Score: {sim.player.score}  "
               f"Level: {sim.enemy.level}")
        arcade.draw_text(txt, x0 + bar_w + 12, y0 - 2, self.HUD_C, 12)

        self._draw_overlay()

    def _draw_overlay(self):
        sim = self.sim
        lines = []
        if sim.round_state is RoundState.GAME_OVER:
            lines = ["GAME OVER", f"Score: {sim.player.score}", "Press ENTER to play again"]
        elif sim.round_state is RoundState.BREAK:
            if sim.bonus_choices:
                lines = ["Round cleared! Pick a bonus:"]
                lines += [f"{i + 1}: {b.description}" for i, b in enumerate(sim.bonus_choices)]
            else:
                lines = ["Press ENTER to start"]
        y = sim.height / 2 + 20 * len(lines) / 2
        for line in lines:
            arcade.draw_text(line, 20, y, self.HUD_C, 12)
            y -= 20


class PlayWindow(SimulationWindow):
    """Human-playable window driving the simulation from the keyboard"""

    def __init__(self, sim: Simulation):
        super().__init__(sim, "Bullet Hell")
        self.loop = FrameLoop(sim)
        self.loop.tick(time.perf_counter())

    def on_update(self, delta_time: float):
        self.loop.tick(time.perf_counter())

    def on_key_press(self, symbol: int, modifiers: int):
        sim = self.sim
        if symbol in KEY_BINDINGS:
            sim.set_input(KEY_BINDINGS[symbol], True)
        elif symbol in (arcade.key.ENTER, arcade.key.RETURN):
            if sim.round_state is RoundState.GAME_OVER or (
                    sim.round_state is RoundState.BREAK and not sim.bonus_choices):
                sim.start_game()
        elif symbol in (arcade.key.KEY_1, arcade.key.KEY_2) and sim.bonus_choices:
            sim.select_bonus(0 if symbol == arcade.key.KEY_1 else 1)
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in KEY_BINDINGS:
            self.sim.set_input(KEY_BINDINGS[symbol], False)


def main():
    PlayWindow(Simulation())
    arcade.run()


if __name__ == "__main__":
    main()
