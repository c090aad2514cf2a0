import pytest

from graphquest.maze import Direction, Item, Maze, load_maze, parse_items

CSV = (
    "ID,Nombre,Descripcion,Items,Arriba,Abajo,Izquierda,Derecha,EsFinal\n"
    '1,Entrada,"Una sala, oscura","Cuchillo,3,5;Pan,1,2",-1,2,-1,3,No\n'
    '2,Pasillo,Largo,"",1,-1,-1,9,No\n'
    '3,Salida,Luz,"Oro,20,50",-1,-1,1,-1,Si\n'
    '1,Duplicado,Otra,"",-1,-1,-1,-1,No\n'
    "4,Corta,Falta\n"
)


@pytest.fixture
def maze(tmp_path):
    path = tmp_path / "maze.csv"
    path.write_text(CSV, encoding="utf-8")
    return load_maze(path)


def test_load_skips_header_short_rows_and_duplicates(maze):
    assert sorted(maze.scenarios) == ["1", "2", "3"]
    assert maze.start().name == "Entrada"


def test_quoted_description_keeps_separator(maze):
    assert maze.start().description == "Una sala, oscura"


def test_items_parsed(maze):
    assert maze.start().items == [Item("Cuchillo", 3, 5), Item("Pan", 1, 2)]
    assert maze.get("2").items == []


def test_final_flag(maze):
    assert maze.get("3").final is True
    assert maze.get("1").final is False


def test_exits_and_exit(maze):
    start = maze.start()
    assert start.exits() == [Direction.DOWN, Direction.RIGHT]
    assert start.exit(Direction.UP) is None
    assert start.exit(Direction.DOWN) == "2"
    assert start.exit(Direction.RIGHT) == "3"


def test_neighbours_in_direction_order(maze):
    assert [s.name for s in maze.neighbours("1")] == ["Pasillo", "Salida"]


def test_neighbours_skip_missing_targets(maze):
    assert maze.get("2").exit(Direction.RIGHT) == "9"
    assert [s.scenario_id for s in maze.neighbours("2")] == ["1"]


def test_get_unknown_returns_none(maze):
    assert maze.get("42") is None


def test_neighbours_unknown_raises(maze):
    with pytest.raises(KeyError):
        maze.neighbours("42")


def test_start_missing_raises():
    with pytest.raises(LookupError):
        Maze().start()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_maze(tmp_path / "absent.csv")


def test_parse_items_trims_and_ignores_incomplete():
    assert parse_items("Espada, 4 ,7; Escudo,2") == [Item("Espada", 4, 7)]


def test_parse_items_empty():
    assert parse_items("") == []


def test_parse_items_truncates_long_names():
    (item,) = parse_items("Candelabros,1,1")
    assert len(item.name) == 10
    assert "Candelabros".startswith(item.name)


@pytest.mark.parametrize(
    ("key", "direction"),
    [("w", Direction.UP), ("S", Direction.DOWN), ("a", Direction.LEFT), ("D", Direction.RIGHT)],
)
def test_direction_from_key(key, direction):
    assert Direction.from_key(key) is direction


@pytest.mark.parametrize("key", ["x", "", "1"])
def test_direction_from_key_invalid(key):
    with pytest.raises(ValueError):
        Direction.from_key(key)


def test_direction_labels():
    labels = [Direction.from_key(key).label for key in "wsad"]
    assert labels == ["Arriba", "Abajo", "Izquierda", "Derecha"]