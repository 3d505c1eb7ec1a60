"""Configuration records for segmentation, mapping, the scene graph and cameras."""

from __future__ import annotations

from dataclasses import dataclass, field

LABEL_UNKNOWN = 0
"""Label value that marks an invalid segment."""
EDGE = 0
"""Pixel value of an edge in an edge image."""
NO_EDGE = 255
"""Pixel value of a non-edge in an edge image."""


@dataclass
class InSegConfig:
    """Settings for incremental segmentation and reconstruction."""

    remove_dynamic_point: bool = False
    surfel_invalid_frame_threshold: int = 30
    surfel_stable_frame_threshold: int = 2
    update_point_angle_threshold: float = 75.0
    update_point_dot_product_threshold: float = 30.0
    label_merge_confidence_threshold: int = 3
    label_merge_overlap_ratio: float = 0.3
    label_min_size: int = 10
    label_point_dot_product_threshold: float = 10.0
    depth_edge_threshold: float = 0.98
    label_size_threshold: int = 15
    label_region_ratio: float = 0.3


@dataclass
class MainConfig:
    """Depth uncertainty and image pyramid levels."""

    uncertainty_coefficient_depth: float = 0.0000285
    max_pyr_level: int = 6
    min_pyr_level: int = 3


@dataclass
class MapConfig:
    """Depth range and filtering settings for the map (depths in mm)."""

    near_depth_threshold: float = 10.0
    far_depth_threshold: float = 10000.0
    num_iterations_bilateral_filtering: int = 0
    normalize_depth: bool = False


@dataclass
class SegmentationConfig:
    """Minimum region size in pixels for a label to be propagated."""

    min_region_size: int = 10


@dataclass
class ConfigPSLAM:
    """Settings of the scene graph SLAM system."""

    use_thread: bool = True
    use_fusion: bool = True
    graph_predict: bool = True
    pth_model: str = "./traced/"
    filter_num_node: int = 512
    n_pts: int = 512
    neighbor_margin: float = 500.0
    update_thres_node_size: float = 0.2
    update_thres_time_stamp: int = 50
    pth: str = "./config_graph.txt"
    inseg_config: InSegConfig = field(default_factory=InSegConfig)
    main_config: MainConfig = field(default_factory=MainConfig)
    map_config: MapConfig = field(default_factory=MapConfig)
    segmentation_config: SegmentationConfig = field(default_factory=SegmentationConfig)

    @classmethod
    def from_path(cls, path: str) -> ConfigPSLAM:
        """Build a configuration bound to ``path``; an empty path keeps the default."""
        config = cls()
        if path:
            config.pth = str(path)
        return config


@dataclass
class CameraParameters:
    """Pinhole intrinsics and image size."""

    cx: float = 0.0
    cy: float = 0.0
    fx: float = 0.0
    fy: float = 0.0
    width: int = 0
    height: int = 0

    def set(self, width: int, height: int, fx: float, fy: float, cx: float, cy: float) -> None:
        """Set all parameters; sizes are stored as 16-bit unsigned values."""
        self.width = int(width) & 0xFFFF
        self.height = int(height) & 0xFFFF
        self.fx = float(fx)
        self.fy = float(fy)
        self.cx = float(cx)
        self.cy = float(cy)