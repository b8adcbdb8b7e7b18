from collections import deque

# Independent of mazeforge.maze.connectivity on purpose: a plain deque BFS over
# every open cell (border included) so the generator's own search is not
# validating itself.


def open_cells(grid):
    return {(x, y) for x in range(len(grid)) for y in range(len(grid[0])) if grid[x][y]}


def reachable_from(grid, start):
    """Return set of open (x,y) cells reachable from start (4-neighbour)."""
    w = len(grid)
    h = len(grid[0])
    if not grid[start[0]][start[1]]:
        return set()
    q = deque([start])
    vis = {start}
    while q:
        x, y = q.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < w and 0 <= ny < h and (nx, ny) not in vis and grid[nx][ny]:
                vis.add((nx, ny))
                q.append((nx, ny))
    return vis


def border_cells(w, h):
    for x in range(w):
        for y in range(h):
            if x in (0, w - 1) or y in (0, h - 1):
                yield x, y


def open_adjacency_edges(grid):
    """Count undirected edges between orthogonally adjacent open cells."""
    w = len(grid)
    h = len(grid[0])
    edges = 0
    for x in range(w):
        for y in range(h):
            if not grid[x][y]:
                continue
            if x + 1 < w and grid[x + 1][y]:
                edges += 1
            if y + 1 < h and grid[x][y + 1]:
                edges += 1
    return edges


def rect_cells(rect, cell_size):
    """Cells covered by a pixel rect (x, y, width, height)."""
    x0, y0 = rect[0] // cell_size, rect[1] // cell_size
    w, h = rect[2] // cell_size, rect[3] // cell_size
    return [(x, y) for x in range(x0, x0 + w) for y in range(y0, y0 + h)]


def grid_from_rows(rows):
    """Build a column-major bool grid from strings ('.' open, '#' closed), rows top-down."""
    h = len(rows)
    w = len(rows[0])
    return [[rows[y][x] == "." for y in range(h)] for x in range(w)]


def closed_grid(w, h):
    return [[False] * h for _ in range(w)]


def open_grid(w, h):
    return [[True] * h for _ in range(w)]
