from .config import dotdict, default_config, load_config, apply_variant, dump_config
from .report import report
