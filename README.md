# pslam

Python building blocks for incremental scene-graph SLAM on RGB-D sequences.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `pslam.disjoint_forest`: `DisjointSetForest`, a union-find structure over integer keys
  with union by rank, path compression and a value per element. Besides `add_element`,
  `add_elements`, `find_set`, `union_sets`, `set_count`, `element_count`, `value_of`,
  `rank_of` and `get_element_keys`, it can `remove_element` (relinking the elements that
  shared its set) and `remove_union` to split a set. `x in forest` tests membership;
  asking for an unknown key raises `KeyError`.
- `pslam.edge`: `Edge`, a relation between two nodes (`node_from`, `node_to`) holding
  per-label probabilities. `update_prediction(prop, fusion)` adds new labels, or with
  `fusion=True` averages them with the stored values (weights capped at 100), and picks
  the most probable label; `get_label()` returns it (`Edge.NONE` until a prediction
  arrives). `copy()` copies the endpoints and predictions.
- `pslam.config`: dataclasses with their defaults: `ConfigPSLAM` (with
  `ConfigPSLAM.from_path`), `InSegConfig`, `MainConfig`, `MapConfig`,
  `SegmentationConfig`, and `CameraParameters` with `set(width, height, fx, fy, cx, cy)`.
  The constants `LABEL_UNKNOWN`, `EDGE` and `NO_EDGE` are defined here too.
- `pslam.arg_parser`: `Parser`, a `--name value...` command-line parser.
  `add_option` returns the option's value converted to the type of its default (int,
  float, bool, str, or a list of these); `add_switch` toggles a boolean when the switch is
  given. `show_msg()` prints the help listing (`--h` / `--help`), missing required options,
  unknown options or the resolved values, and returns a `ParseStatus`
  (`HELP`, `ERROR`, `WARNING`, `OK`). `output_log(stream)` writes the resolved values to a
  stream. Values that cannot be converted, or too few arguments, raise `ParserError`.
- `pslam.projection`: `perspective(fovy_x, fovy_y, z_near, z_far)` and
  `look_at(eye, center, up)` return 4x4 NumPy matrices; `create_folder(path)` creates a
  folder if it is missing.
- `pslam.timing_report`: `summarize(values)` returns `TimingStats` (mean, population
  variance, standard deviation, count); `write_timing_report(times, output_dir,
  filename="times.csv")` writes one semicolon-separated row per timer, sorted by name.
- `pslam.frame_io`: helpers for RGB-D datasets: `frame_file_name` builds zero-padded frame
  paths, `load_pose` reads a 4x4 pose and scales its translation from metres to
  millimetres, `mask_depth` zeroes depths beyond a limit, `rotate_counterclockwise`,
  `rotation_matrix_z`, `load_scannet_intrinsics` reads `intrinsics.txt` into
  `CameraParameters`, and `file_exists`.

## Example

```python
from pslam.disjoint_forest import DisjointSetForest
from pslam.edge import Edge
from pslam.projection import perspective

forest = DisjointSetForest({1: "a", 2: "b", 3: "c"})
forest.union_sets(1, 2)
assert forest.find_set(1) == forest.find_set(2)
assert forest.set_count() == 2

edge = Edge()
edge.update_prediction({"same part": 0.7, "none": 0.3}, fusion=True)
print(edge.get_label())  # "same part"

proj = perspective(1.0, 1.0, 0.1, 100.0)
```

## What this package does not do

It has no reconstruction or segmentation pipeline, no scene-graph container, no
graph prediction model and no command to run. It does not decode image files or
sensor recordings: depth and colour images have to be loaded by other means and
passed in as NumPy arrays. Nothing is exported to PLY or JSON.