"""Building blocks for scene-graph SLAM: union-find, edges, configuration, CLI parsing, camera matrices, timing reports and frame I/O."""

__version__ = "0.1.0"