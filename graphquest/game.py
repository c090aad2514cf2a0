"""The maze game: player state, moves and the interactive console loop."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TextIO

from graphquest.maze import Direction, Item, Maze, Scenario, load_maze
from graphquest.textio import clear_screen, wait_for_key

DEFAULT_MAZE_PATH = "data/graphquest.csv"
START_TIME = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_MENU = (
    "========================================\n"
    "     Bienvenido a Juego del Laberinto\n"
    "========================================\n"
    "1) Cargar laberinto\n"
    "2) Iniciar partida\n"
    "3) Salir\n"
)

_OPTIONS = (
    "\n== OPCIONES ==\n"
    "1) Recoger items\n"
    "2) Descartar items\n"
    "3) Avanzar en una direccion\n"
    "4) Reiniciar partida\n"
    "5) Salir\n"
    "Seleccione una opcion: "
)


def move_cost(weight: int) -> int:
    """Time a move takes while carrying the given weight."""
    total = weight + 10
    return total // 10 if total >= 0 else -((-total) // 10)


@dataclass
class Player:
    """What the player carries and how much time is left."""

    items: list[Item] = field(default_factory=list)
    weight: int = 0
    time: int = START_TIME

    def score(self) -> int:
        """Total points of the carried items."""
        return sum(item.score for item in self.items)


def render_state(scenario: Scenario, player: Player) -> str:
    """Describe the current scenario, the inventory and the way out."""
    lines = [
        "",
        "=== ESTADO ACTUAL ===",
        f"Escenario: {scenario.name}",
        f"Descripcion: {scenario.description}",
        "",
        "Items disponibles:",
    ]
    lines += [
        f"  {index}) {item.name} (Peso: {item.weight}, Puntaje: {item.score})"
        for index, item in enumerate(scenario.items, start=1)
    ]
    lines += ["", f"Tiempo restante: {player.time}", "", "Inventario:"]
    if not player.items:
        lines.append("  (vacio)")
    lines += [
        f"  - {item.name} (Peso: {item.weight}, Puntaje: {item.score})"
        for item in player.items
    ]
    lines.append(f"Peso total: {player.weight} | Puntaje: {player.score()}")
    lines += ["", "Direcciones disponibles:"]
    lines += [f"{direction.key}) {direction.label}" for direction in scenario.exits()]
    return "\n".join(lines) + "\n"


class Game:
    """One play-through of a maze."""

    def __init__(self, maze: Maze) -> None:
        self.maze = maze
        self.player = Player()
        self.current = maze.start()

    def pick_up(self, choose: Callable[[Item], bool]) -> list[Item]:
        """Take the items of the current scenario that choose accepts."""
        self.player.time -= 1
        picked: list[Item] = []
        kept: list[Item] = []
        for item in self.current.items:
            (picked if choose(item) else kept).append(item)
        self.current.items = kept
        self.player.items.extend(picked)
        self.player.weight += sum(item.weight for item in picked)
        return picked

    def discard(self, choose: Callable[[Item], bool]) -> list[Item]:
        """Drop the carried items that choose accepts."""
        self.player.time -= 1
        dropped: list[Item] = []
        kept: list[Item] = []
        for item in self.player.items:
            (dropped if choose(item) else kept).append(item)
        self.player.items = kept
        self.player.weight -= sum(item.weight for item in dropped)
        return dropped

    def move(self, direction: Direction) -> Scenario:
        """Walk in a direction, spending time according to the carried weight."""
        target = self.current.exit(direction)
        if target is None:
            raise ValueError(f"no way {direction.label} from {self.current.name}")
        scenario = self.maze.get(target)
        if scenario is None:
            raise LookupError(f"scenario {target!r} does not exist")
        self.player.time -= move_cost(self.player.weight)
        self.current = scenario
        return scenario

    def restart(self) -> None:
        """Empty the inventory, reset the time and go back to the start."""
        self.player = Player()
        self.current = self.maze.start()

    def out_of_time(self) -> bool:
        """Whether the time has run out."""
        return self.player.time <= 0

    def at_goal(self) -> bool:
        """Whether the current scenario is a final one."""
        return self.current.final


def _scan_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _final_summary(player: Player) -> str:
    lines = ["", "¡Has alcanzado el final!", "Objetos en tu inventario:"]
    lines += [f"- {item.name} (Puntaje: {item.score})" for item in player.items]
    lines.append(f"Puntaje total: {player.score()}")
    return "\n".join(lines) + "\n"


def play(maze: Maze, read: Callable[[], str], write: Callable[[str], object]) -> Game:
    """Run a game, reading answers with read and printing with write.

    read returns the next whitespace-free word and raises EOFError when the
    input is exhausted, which ends the game.
    """
    game = Game(maze)

    def ask(verb: str) -> Callable[[Item], bool]:
        def choose(item: Item) -> bool:
            write(f"¿Deseas {verb} {item.name}? (1 = si, 0 = no): ")
            return _scan_int(read()) == 1

        return choose

    try:
        while True:
            write(render_state(game.current, game.player))
            if game.out_of_time():
                write("\nSe te acabo el tiempo. Has perdido.\n")
                return game
            if game.at_goal():
                write(_final_summary(game.player))
                return game

            write(_OPTIONS)
            option = _scan_int(read())
            if option == 1:
                game.pick_up(ask("recoger"))
            elif option == 2:
                game.discard(ask("descartar"))
            elif option == 3:
                write("¿A qué dirección quieres ir? (W/A/S/D): ")
                answer = read()
                try:
                    game.move(Direction.from_key(answer[:1]))
                except ValueError:
                    write("Direccion invalida. Intenta otra.\n")
                except LookupError:
                    write("Error: no se encontro el estado destino.\n")
            elif option == 4:
                write("Reiniciando partida...\n")
                game.restart()
            elif option == 5:
                write("Saliendo del juego...\n")
                return game
            else:
                write("Opcion invalida. Intenta nuevamente.\n")
    except EOFError:
        return game


class _CharReader:
    """Reads single characters and words from a stream, one character ahead."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def read(self, size: int = 1) -> str:
        if self._pending:
            head, self._pending = self._pending, ""
            return head + (self._stream.read(size - 1) if size > 1 else "")
        return self._stream.read(size)

    def char(self) -> str:
        ch = self.read(1)
        while ch and ch.isspace():
            ch = self.read(1)
        if not ch:
            raise EOFError
        return ch

    def word(self) -> str:
        chars = [self.char()]
        while True:
            ch = self.read(1)
            if not ch:
                break
            if ch.isspace():
                self._pending = ch
                break
            chars.append(ch)
        return "".join(chars)


def main(argv: list[str] | None = None) -> int:
    """Show the main menu until the player chooses to leave."""
    parser = argparse.ArgumentParser(prog="graphquest", description="Maze game.")
    parser.add_argument("path", nargs="?", default=DEFAULT_MAZE_PATH, help="maze CSV file")
    args = parser.parse_args(argv)

    reader = _CharReader(sys.stdin)

    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    maze = Maze()
    while True:
        sys.stdout.flush()
        clear_screen()
        write(_MENU)
        write("Ingrese su opcion: ")
        try:
            option = reader.char()
        except EOFError:
            return 0

        if option == "1":
            try:
                maze = load_maze(args.path)
            except OSError as exc:
                print(f"Error al cargar el laberinto: {exc.strerror or exc}", file=sys.stderr)
            else:
                write("Laberinto cargado correctamente.\n")
        elif option == "2":
            try:
                play(maze, reader.word, write)
            except LookupError:
                write("Error: el laberinto no ha sido cargado.\n")
        elif option == "3":
            write("Saliendo del juego...\n")
        else:
            write("Opción invalida.\n")

        wait_for_key(reader)
        if option == "3":
            return 0