from .md_pattern import md_pattern, pattern_to_chr
from .checks import verify_data
from .datasets import load_nhanes
from .simulate import mcar
from .log import setup_logging

__all__ = ['md_pattern', 'pattern_to_chr', 'verify_data', 'load_nhanes', 'mcar', 'setup_logging']
