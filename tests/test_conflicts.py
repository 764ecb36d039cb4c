from hint_engine.conflicts import Conflict, ConflictKind, detect_conflicts, resolve_conflict
from hint_engine.constraints import Constraints, derive_constraints, filter_candidates
from hint_engine.tiles import Tile, TileState, make_row


def test_green_also_excluded():
    conflicts = detect_conflicts(Constraints(greens={0: "a"}, excluded={"a"}))
    assert len(conflicts) == 1
    assert conflicts[0].kind == ConflictKind.GREEN_ALSO_EXCLUDED
    assert conflicts[0].kind == "green-also-excluded"
    assert conflicts[0].letter == "a"


def test_green_twice_reports_letter_once():
    conflicts = detect_conflicts(Constraints(greens={0: "a", 3: "a"}, excluded={"a"}))
    assert [(c.kind, c.letter) for c in conflicts] == [(ConflictKind.GREEN_ALSO_EXCLUDED, "a")]


def test_yellow_also_excluded():
    conflicts = detect_conflicts(Constraints(yellow_positions={"e": {2}}, excluded={"e", "z"}))
    assert [(c.kind, c.letter) for c in conflicts] == [(ConflictKind.YELLOW_ALSO_EXCLUDED, "e")]


def test_impossible_count():
    conflicts = detect_conflicts(Constraints(min_count={"l": 2}, max_count={"l": 1}))
    assert [(c.kind, c.letter) for c in conflicts] == [(ConflictKind.IMPOSSIBLE_COUNT, "l")]
    assert "at least 2" in conflicts[0].description


def test_equal_bounds_are_fine():
    assert detect_conflicts(Constraints(min_count={"l": 2}, max_count={"l": 2})) == []


def test_derived_constraints_are_usually_clean():
    grid = [
        make_row([("a", "green"), ("p", "grey"), ("p", "grey"), ("l", "yellow"), ("e", "grey")]),
        make_row([("a", "grey"), ("l", "green"), ("o", "grey"), ("n", "grey"), ("e", "grey")]),
    ]
    assert detect_conflicts(derive_constraints(grid)) == []


def _contradictory_grid():
    # row 1 proves exactly one l, row 2 claims two
    return [
        make_row(zip("spell", ["grey", "grey", "grey", "green", "grey"])),
        make_row(zip("llama", ["green", "yellow", "grey", "grey", "grey"])),
    ]


def test_contradictory_rows_give_impossible_count_and_no_candidates():
    c = derive_constraints(_contradictory_grid())
    conflicts = detect_conflicts(c)
    assert [(x.kind, x.letter) for x in conflicts] == [(ConflictKind.IMPOSSIBLE_COUNT, "l")]
    assert filter_candidates(["lilts", "hello", "llano"], c) == []


def test_resolve_conflict_clears_grey_tiles_of_letter():
    grid = _contradictory_grid()
    conflict = detect_conflicts(derive_constraints(grid))[0]
    repaired = resolve_conflict(grid, conflict)

    assert repaired[0][4] == Tile()
    assert repaired[0][3] == Tile("l", TileState.GREEN)
    assert repaired[0][0] == Tile("s", TileState.GREY)
    # input untouched
    assert grid[0][4] == Tile("l", TileState.GREY)
    assert detect_conflicts(derive_constraints(repaired)) == []


def test_resolve_conflict_accepts_letter():
    grid = [make_row([("a", "grey"), ("b", "grey"), ("a", "green"), ("c", "grey"), ("d", "grey")])]
    repaired = resolve_conflict(grid, "A")
    assert repaired[0][0] == Tile()
    assert repaired[0][2] == Tile("a", "green")


def test_conflict_is_plain_data():
    c = Conflict(ConflictKind.IMPOSSIBLE_COUNT, "l", "x")
    assert c.kind.value == "impossible-count"
