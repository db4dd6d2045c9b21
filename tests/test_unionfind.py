import pytest

from bomber.unionfind import Node, UnionFind


def build(*rows):
    grid = [[Node(ch, y, x) for x, ch in enumerate(row)] for y, row in enumerate(rows)]
    uf = UnionFind(len(rows), len(rows[0]))
    uf.connect_all(grid)
    uf.assign_bombs(grid)
    return grid, uf


@pytest.mark.parametrize("kind, expected", [(".", True), ("*", True), ("#", False), ("~", False)])
def test_node_walkable(kind, expected):
    assert Node(kind, 0, 0).walkable() is expected


def test_index_is_row_major():
    uf = UnionFind(2, 3)
    assert uf.index(1, 2) == 5


def test_find_starts_as_identity():
    uf = UnionFind(2, 2)
    assert [uf.find(i) for i in range(4)] == [0, 1, 2, 3]


def test_unite_merges_sets():
    uf = UnionFind(1, 4)
    uf.unite(0, 1)
    uf.unite(2, 3)
    assert uf.find(0) == uf.find(1)
    assert uf.find(2) == uf.find(3)
    assert uf.find(0) != uf.find(2)
    uf.unite(1, 3)
    assert len({uf.find(i) for i in range(4)}) == 1


def test_connect_all_splits_on_obstacles():
    grid, uf = build("..#..", "..~..")
    left = uf.find(uf.index(0, 0))
    right = uf.find(uf.index(0, 4))
    assert left != right
    assert uf.find(uf.index(1, 1)) == left
    assert uf.find(uf.index(1, 3)) == right


def test_should_bomb_opens_path_to_end():
    grid, uf = build(".#.")
    assert uf.should_bomb(grid, grid[0][0], grid[0][1], grid[0][2], 1) is True


def test_should_bomb_needs_bombs():
    grid, uf = build(".#.")
    assert uf.should_bomb(grid, grid[0][0], grid[0][1], grid[0][2], 0) is False


def test_should_bomb_counts_layers_of_boulders():
    grid, uf = build(".##.")
    assert uf.should_bomb(grid, grid[0][0], grid[0][1], grid[0][3], 1) is False
    assert uf.should_bomb(grid, grid[0][0], grid[0][1], grid[0][3], 2) is True


def test_should_bomb_reaches_region_with_bombs():
    grid, uf = build(".#*#.")
    assert uf.should_bomb(grid, grid[0][0], grid[0][1], grid[0][4], 1) is True


def test_should_bomb_ignores_uncounted_bombs():
    rows = (".#*#.",)
    grid = [[Node(ch, y, x) for x, ch in enumerate(row)] for y, row in enumerate(rows)]
    uf = UnionFind(1, 5)
    uf.connect_all(grid)
    assert uf.should_bomb(grid, grid[0][0], grid[0][1], grid[0][4], 1) is False