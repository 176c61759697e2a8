import argparse
import matplotlib.pyplot as plt
import numpy as np
import requests

# CONFIGURATION
API_URL = "http://localhost:5000/cost"

# Heading int → arrow drawing params (dx, dy)
HEADING_ARROW = {0: (0.35, 0), 2: (0, 0.35), 4: (-0.35, 0), 6: (0, -0.35)}


def request_solution(rows, min_run, max_run, start=None, goal=None, url=API_URL):
    """POST the grid to the path cost server and return the decoded JSON."""
    payload = {"grid": rows, "min_run": min_run, "max_run": max_run}
    if start is not None:
        payload["start"] = list(start)
    if goal is not None:
        payload["goal"] = list(goal)
    res = requests.post(url, json=payload, timeout=30)
    res.raise_for_status()
    return res.json()


def draw_solution(ax, cells, path, title=""):
    """
    Draw the cost heat-map with the route on top.
    cells: 2D array-like, cells[y][x]. path: list of {x, y, d, r} dicts.
    """
    cells = np.asarray(cells)
    height, width = cells.shape

    ax.clear()
    ax.imshow(cells, cmap="YlOrRd", origin="lower", extent=(0, width, 0, height))
    ax.set_xticks(range(width + 1))
    ax.set_yticks(range(height + 1))
    ax.grid(True, color="white", linewidth=0.5)
    ax.set_title(title)

    if not path:
        return []

    xs = [p["x"] + 0.5 for p in path]
    ys = [p["y"] + 0.5 for p in path]
    lines = ax.plot(xs, ys, color="royalblue", linewidth=2)

    # Start / goal markers
    ax.plot(xs[0], ys[0], "go", markersize=10)
    ax.plot(xs[-1], ys[-1], "r*", markersize=14)

    # Heading arrows where the route turns
    for prev, curr in zip(path, path[1:]):
        if prev["d"] != curr["d"] and prev["r"] > 0:
            dx, dy = HEADING_ARROW[curr["d"]]
            ax.arrow(prev["x"] + 0.5, prev["y"] + 0.5, dx, dy,
                     head_width=0.15, color="navy")
    return lines


def main():
    parser = argparse.ArgumentParser(description="Plot a solved crucible route.")
    parser.add_argument("input", help="Digit grid text file.")
    parser.add_argument("--min-run", type=int, default=1)
    parser.add_argument("--max-run", type=int, default=3)
    parser.add_argument("--url", default=API_URL)
    args = parser.parse_args()

    with open(args.input) as f:
        rows = [line.strip() for line in f if line.strip()]

    if not rows:
        print(f"❌ {args.input} holds no grid rows")
        return

    print(f"📡 Sending {len(rows)}x{len(rows[0])} grid...")
    try:
        data = request_solution(rows, args.min_run, args.max_run, url=args.url)
    except requests.RequestException as e:
        print(f"❌ Connection Failed: {e}")
        return

    if data["reachable"]:
        print(f"✅ Path found! Cost: {data['cost']}")
        title = f"runs {args.min_run}..{args.max_run}: cost {data['cost']}"
    else:
        print(f"❌ No path ({data['status']})")
        title = f"runs {args.min_run}..{args.max_run}: {data['status']}"

    cells = [[int(c) for c in row] for row in rows]
    fig, ax = plt.subplots(figsize=(10, 10))
    draw_solution(ax, cells, data["path"], title)
    plt.show()


if __name__ == "__main__":
    main()
