# graphquest

A small text-mode maze game. The maze is a graph of scenarios read from a CSV
file. Each scenario has a name, a description, items lying around and exits
up, down, left and right. You start in scenario `1` with 10 units of time and
try to reach a final scenario while carrying the most valuable items.

The game's menus and messages are in Spanish.

## Installing

```
pip install .
```

## Playing

```
graphquest [path]
```

`path` is the maze CSV file; it defaults to `data/graphquest.csv` relative to
the current directory. The terminal is cleared (with the `clear` command, when
it exists) before the main menu is shown. The main menu offers:

1. Load the maze from `path`
2. Start a game (with no maze loaded, an error message is shown instead)
3. Quit

After each choice the game waits for a key press. Reaching the end of input
also quits.

During a game you can:

1. Pick up items in the current scenario; you are asked about each item in
   turn (`1` = yes, `0` = no). Costs 1 unit of time.
2. Discard items from your inventory the same way. Costs 1 unit of time.
3. Move with `W` (up), `S` (down), `A` (left) or `D` (right), in either case.
   A move costs 1 unit of time plus 1 for every full 10 units of weight
   carried.
4. Restart: empty inventory, 10 units of time, back to scenario `1`.
5. Quit the game and return to the main menu.

Each turn shows the current scenario, its items, the time left, your
inventory with its total weight and score, and the directions open to you.
Reaching a final scenario shows your inventory and total score. When the time
is at 0 or below, the game is lost.

## Maze file

The CSV has a header line followed by one line per scenario:

```
ID,Name,Description,Items,Up,Down,Left,Right,IsFinal
1,Entrance,"A dark hall","Key,1,5;Coin,1,10",-1,2,-1,3,No
```

- Fields may be wrapped in double quotes so they can contain commas.
- Items are separated by `;`, and each item is `name,weight,score`; entries
  with fewer than three parts are ignored and names are cut to 10 characters.
- An exit of `-1` means there is no path that way.
- `IsFinal` is `Si` for a goal scenario; anything else means it is not.
- Rows with fewer than nine fields are skipped; if an id appears twice, the
  first row wins.

## Using it as a library

```python
from graphquest.maze import load_maze, Direction
from graphquest.game import Game

maze = load_maze("data/graphquest.csv")
game = Game(maze)
game.pick_up(lambda item: item.score > 5)
game.move(Direction.from_key("s"))
print(game.player.score(), game.at_goal(), game.out_of_time())
```

- `graphquest.maze`: `load_maze`, `parse_items`, `Maze` (`start`, `get`,
  `neighbours`), `Scenario` (`exit`, `exits`), `Item` and `Direction`
  (`from_key`).
- `graphquest.game`: `Game` (`pick_up`, `discard`, `move`, `restart`,
  `out_of_time`, `at_goal`), `Player`, `move_cost`, `render_state`, and
  `play(maze, read, write)`, which runs the interactive loop over any input
  and output functions. `Game.move` raises `ValueError` for a direction with
  no exit and `LookupError` when the exit leads to an unknown scenario.
- `graphquest.textio`: `parse_csv_line`, `read_csv`, `split_string`,
  `clear_screen` and `wait_for_key`.
- `graphquest.containers`: `KeyedMap`, a map whose keys match through a
  custom equality or ordering predicate (a sorted map keeps its pairs in key
  order), with `MapPair` and `sorted_insert`.
- `graphquest.heap`: `MaxHeap`, a max-priority queue with `push`, `pop`,
  `top` and `len()`.

## Limits

The game keeps no saved games or high scores; everything lives in memory for
the length of one run.

## Tests

```
pip install .[test]
pytest
```