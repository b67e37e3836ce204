# polarcog

Compute the center of gravity of weighted items whose locations are given in
polar coordinates, and optionally draw them on a character-based polar plot
in the terminal.

## Installation

```
pip install .
```

## Command line

```
polarcog
```

The program reads from standard input. It asks for the number of items, then
for each item its weight, radius and angle in degrees. It then asks
`Do you want to plot the results? (y/n)`; an answer of `y` or `Y` draws the
plot, anything else skips it. Finally it prints the center of gravity as a
radius and an angle in radians and degrees, each to two decimal places.

A number of items that is not a positive integer, or a weight, radius or
angle that is not a number, prints an error to standard error and the
program exits with status 1.

If the total weight is zero, the center of gravity is undefined: a
`RuntimeWarning` is issued and the result is reported as radius 0, angle 0.

The plot is a 60 × 30 character grid scaled to the largest radius among the
items and the center of gravity (or 1 if that is zero). `+` marks the origin,
`.` marks the circle boundary, `1`–`9` mark the first nine items, `#` marks
any later item and `X` marks the center of gravity, which is drawn over
anything else in its cell.

A small demonstration of the upper-confidence-bound (UCB1) score used in
multi-armed bandit problems prints the scores of three fixed example arms:

```
polarcog-ucb
```

## Library use

```python
import math
from polarcog.geometry import Item, PolarCoord, center_of_gravity
from polarcog.plot import render_polar_plot

items = [
    Item(weight=2.0, location=PolarCoord(r=1.0, theta=0.0)),
    Item(weight=1.0, location=PolarCoord(r=1.0, theta=math.pi / 2)),
]
cog = center_of_gravity(items)
print(cog.r, cog.theta)
print(render_polar_plot(items, cog, max_radius=1.0))
```

- `polarcog.geometry`: the frozen dataclasses `PolarCoord(r, theta)` (angle
  in radians) and `Item(weight, location)`, and
  `center_of_gravity(items)`, which returns a `PolarCoord`.
- `polarcog.plot`: `render_polar_plot(items, cog, max_radius)` returns the
  grid as text and raises `ValueError` when `max_radius` is zero;
  `draw_polar_plot(items, cog, max_radius, out=None)` writes the framed plot
  and its legend to `out`, or to standard output.
- `polarcog.cli`: `input_items(count, read, write)` prompts through `write`
  for `count` items, reading words from `read` (which returns `None` at end
  of input), and returns the items with the largest radius entered; angles
  are taken in degrees. Unparsable input raises `InputError`, a
  `ValueError`. `main()` runs the interactive program.
- `polarcog.bandit`: the dataclass `Arm(id, pulls, total_reward)` and
  `ucb(arm, total_pulls)`, which returns the UCB1 score; an arm that has
  never been pulled scores infinity. `main()` runs the demonstration.

## Limitations

The package works on items entered interactively or built in code; it does
not read items from files or save results, and the plot is text only. The
bandit module scores arms but does not select arms or run a bandit
simulation.

## Tests

```
pip install ".[test]"
pytest
```