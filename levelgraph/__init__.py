from .errors import (
    AmbiguousDirectionError,
    DegenerateGeometryError,
    GraphOperationError,
    InvalidCountError,
    NoSelectionError,
    OptionsError,
)
from .options import (
    DistributeOptions,
    ExtrudeOptions,
    get_default_distribute_options,
    get_default_extrude_options,
    set_default_distribute_options,
    set_default_extrude_options,
    validate_distribute_options,
    validate_extrude_options,
)
from .host import MapHost
from .level_map import Edge, LevelMap, Marker, Vertex
from .graph import GraphView
from .components import Component, decompose_edges, decompose_selection
from .paths import PathStep, find_path_start, walk_component
from .placement import Placement, distance_plan, plan_placements
from .endpoints import EndpointPair, select_endpoints
from .extrusion import ExtrusionModel, ExtrusionPlan, arc_center, build_extrusion_model
from .operations import DistributeResult, ExtrudeResult, distribute, extrude, plan_extrusions
from .mapio import dump_map, load_map, map_from_dict, map_to_dict

__all__ = [
    'AmbiguousDirectionError',
    'DegenerateGeometryError',
    'GraphOperationError',
    'InvalidCountError',
    'NoSelectionError',
    'OptionsError',
    'DistributeOptions',
    'ExtrudeOptions',
    'get_default_distribute_options',
    'get_default_extrude_options',
    'set_default_distribute_options',
    'set_default_extrude_options',
    'validate_distribute_options',
    'validate_extrude_options',
    'MapHost',
    'Edge',
    'LevelMap',
    'Marker',
    'Vertex',
    'GraphView',
    'Component',
    'decompose_edges',
    'decompose_selection',
    'PathStep',
    'find_path_start',
    'walk_component',
    'Placement',
    'distance_plan',
    'plan_placements',
    'EndpointPair',
    'select_endpoints',
    'ExtrusionModel',
    'ExtrusionPlan',
    'arc_center',
    'build_extrusion_model',
    'DistributeResult',
    'ExtrudeResult',
    'distribute',
    'extrude',
    'plan_extrusions',
    'dump_map',
    'load_map',
    'map_from_dict',
    'map_to_dict',
]
