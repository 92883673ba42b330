# planetside

This is the simulation core of a game set on a small round planet. The package
covers geometry and rules. It has no pure-Python dependencies.

## Modules

- `planetside.noise`: `Perlin(seed)` is seeded 2D gradient noise. `get(x, y)`
  returns a value in `[-1, 1]`.
- `planetside.planet`: the planet model.
  - `PlanetConfiguration` holds the planet settings. The defaults are seed 11,
    radius 1400, resolution 500, amplitude 2000 and frequency 80.
  - `get_surface_radii` builds `(angle, radius)` pairs from a configuration.
  - `normalize_radians` and `forward` are helper functions.
  - `Transform` is a frozen dataclass with a translation, a rotation about z and
    a scale.
  - `Planet` turns angles and tile indices into surface positions. See
    `radians_to_radii`, `radians_to_transform`, `index_to_transform` and
    `radians_to_index`.
  - `Planet` also gives wrapped neighbour indices with `numbers_in_radius` and
    `number_is_in_radius`.
  - `Planet.tiles` maps a tile id to the list of tile ids it is cabled to. It
    is used by `powergrid_tiles_are_connected` and
    `powergrid_register_connection`.
- `planetside.mesh`: `Mesh` is an indexed triangle list with positions, UVs,
  normals and a `triangles` view.
  - `generate_planet_mesh(radii)` builds a triangle fan around the origin.
  - `background_quad()` builds a full-screen quad.
- `planetside.foliage`: foliage placement and animation.
  - `generate_foliage_positions` returns seeded, noise-clustered transforms
    around a planet.
  - `grass_texture` and `rock_texture` pick sprite paths.
  - `FoliageItem.place` jitters a transform.
  - `WindSway` and `Rotate` give the animation angles.
- `planetside.poi`: points of interest.
  - `PointOfInterestType` has the values `STONE`, `COPPER` and `TREE`.
  - `PointOfInterestBuilder` sets weights, probability, offsets and seed, then
    `spawn_all(planet)` registers the points in `planet.points_of_interest`.
  - `generate_pois` spawns the standard ores and trees.
  - `Tree` tracks age, up to 3.
  - `PointOfInterestHighlight` is a short colour flash, with `green()` and
    `red()`.
- `planetside.cable`: cables between slots.
  - `cable_geometry(start, end)` gives the position, rotation and size of a
    sagging cable.
  - `preview_geometry` does the same and flags cables longer than
    `MAX_CABLE_LENGTH` (200).
  - `SlotCablePlacement` tracks which slot a cable is being started from.
- `planetside.slot`: `SlotBoard` holds a planet's cable slots and the cables
  between them.
  - It handles hover, click and cancel, and slot and outline colours
    (`SlotColor`).
  - A cable is refused if it joins a tile to itself, if the two tiles are
    already connected, or if it is too long.
  - Requests to open or close the stats panel are recorded in `stats_events`.
  - `breathe_scale` gives the idle pulse of a slot.
- `planetside.player`: `Player.update(planet, pressed, delta)` moves the player
  along the surface. The keys are given as names:
  - `"KeyA"` and `"KeyD"` walk.
  - `"ShiftLeft"` sprints.
  - `"ControlLeft"` sneaks.
  - Movement advances the `RunAnimation` frame timer.
- `planetside.camera`: `CameraState.control(planet, player_radians, camera_input)`
  applies one frame of `CameraInput`:
  - right-mouse panning, with the elevation clamped to `[-5, 120]`;
  - smooth following of the player;
  - scroll zoom, clamped to `[0.2, 10]`;
  - `"Backspace"` to reset the zoom, and `"KeyL"` / `"KeyO"` to zoom out and in.

  The module also provides `update_camera_transform`, `CameraState.resize` and
  `fit_canvas_scale`.

## Install

```
pip install .
```

## Example

```python
from planetside.planet import Planet, PlanetConfiguration
from planetside.poi import generate_pois

planet = Planet.from_configuration(PlanetConfiguration(seed=11, resolution=500))
print(planet.tile_places())
print(planet.index_to_transform(0, 0.0, 10.0, 1).translation)
print(planet.numbers_in_radius(0, 2))
print(len(generate_pois(planet)))
```

## What it does not do

There is no renderer, window, input loop, audio or game executable. The meshes,
textures and colours are plain data, for a front end to draw. Tiles carry only
their cable connections. There are no tile types, energy production or
per-tick simulation of machines.

## Tests

```
pip install .[test]
pytest
```