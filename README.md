# quadsim

An interactive simulation of particles bouncing around a rectangular area. Particles
that touch turn red. Collisions are found in one of two ways, and you can switch
between them while the simulation runs:

- **BRUTE**: every particle is checked against every other particle.
- **QUAD**: particles go into a quadtree (node capacity 4), and each particle is only
  checked against the particles whose bounds overlap its own.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
quadsim
```

This opens a window three quarters the size of the desktop, with a white background,
limited to 60 frames per second. Particles move inside a boundary that takes up the
left three quarters of the window. The panel on the right holds the controls:

- **OBJECTS**, **RADIUS**, **SPEED**: number fields for the particle count (default 50),
  the particle radius (default 2) and the particle speed (default 100). Click a field
  to select it, then type digits or a period; Backspace deletes the last character.
  A field holds at most 15 characters.
- **APPLY**: reads the three fields and starts again with a new set of particles at
  random positions and velocities.
- **PAUSE**: stops or resumes the motion, and prints `Paused` or `Resumed`.
- **MODE: BRUTE / MODE: QUAD**: switches how collisions are detected.

A button's action runs when the left mouse button is pressed over it and again when
it is released over it, so a full click on **PAUSE** or **MODE** toggles twice; press
and move off the button before releasing to toggle once.

The frame rate is shown in the top left corner and is updated once a second. Closing
the window ends the program.

## Using the pieces in code

The quadtree, geometry and collision code can be used without opening a window:

```python
from quadsim.geometry import Rect
from quadsim.particle import Particle
from quadsim.quadtree import QuadTree
from quadsim.collision import particles_collide

tree = QuadTree(Rect(0, 0, 800, 600), 4)

particles = []
for x, y in [(100, 100), (103, 101), (400, 300)]:
    p = Particle(3.0)
    p.position = (x, y)
    particles.append(p)
    tree.insert(p)

first = particles[0]
for other in tree.query(first.bounds()):
    if other is not first and particles_collide(first, other):
        print("collision at", other.position)
```

- `quadsim.geometry.Rect(left, top, width, height)` is a frozen rectangle with
  `right`, `bottom`, `intersects(other)` (overlap with non-empty area) and
  `contains(x, y)` (left and top edges inclusive).
- `quadsim.particle.Particle(radius)` has `position` (top-left corner of its bounding
  box), `velocity` and `color`. `update(dt, boundary)` reverses the velocity when the
  particle is past an edge of the boundary and then moves it; `bounds()` returns its
  bounding box; `render(surface)` draws it with pygame.
- `quadsim.collision.circles_collide(position_a, radius_a, position_b, radius_b)` and
  `particles_collide(a, b)` report whether the distance between the two positions is
  less than the sum of the radii.
- `quadsim.quadtree.QuadTree(boundary, capacity)` stores any object that has a
  `bounds()` method and a `position`. It offers `insert`, `query(area)` (distinct
  overlapping objects, leaving out ones whose bounds equal `area`), `search`,
  `equals`, `reset`, `set_data`, `boundaries()` (the rectangle of every node, root
  first) and `draw(surface)`.
- `quadsim.textbox.TextBox`, `quadsim.button.Button`, `quadsim.game.Game` with the
  abstract `quadsim.game.GameState`, and `quadsim.main_screen.MainScreen` make up the
  interactive window.

## What it does not do

- The window does not show the quadtree's subdivisions; `QuadTree.draw` exists but the
  simulation screen never calls it.
- The window size is fixed when it opens; resizing the desktop or window does not
  relayout the controls.
- Settings are not saved between runs.