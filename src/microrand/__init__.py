"""microrand: minimal deterministic LCG random number generator."""

__version__ = "0.1.0"

from microrand.analytics.uniformity import UniformityReport as UniformityReport
from microrand.analytics.uniformity import uniformity_report as uniformity_report
from microrand.config.defaults import default_params as default_params
from microrand.config.defaults import park_miller_params as park_miller_params
from microrand.config.presets import get_preset as get_preset
from microrand.config.presets import load_presets as load_presets
from microrand.config.schema import LCGParams as LCGParams
from microrand.core.generator import RandomGenerator as RandomGenerator
from microrand.core.rng import make_rng as make_rng
from microrand.utils.exceptions import ConfigError as ConfigError
from microrand.utils.exceptions import InvalidRangeError as InvalidRangeError
from microrand.utils.exceptions import MicroRandError as MicroRandError
