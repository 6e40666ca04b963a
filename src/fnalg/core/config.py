"""
YAML configuration of the numeric examples and of the overflow policy.

Example file:

    overflow:
        dtype: int32
        mode: saturate
    small_bound: 50
"""
from dataclasses import dataclass
from typing import *

import logging
import os
import yaml

from ..numeric import SMALL_BOUND


class YamlLimitedSafeLoader(type):
    """Meta YAML loader that skips the resolution of the specified YAML tags."""
    def __new__(cls, name, bases, namespace, do_not_resolve: Set[str]) -> Type[yaml.SafeLoader]:
        do_not_resolve = set(do_not_resolve)
        implicit_resolvers = {
            key: [(tag, regex) for tag, regex in mappings if tag not in do_not_resolve]
            for key, mappings in yaml.SafeLoader.yaml_implicit_resolvers.items()
        }
        return super().__new__(
            cls,
            name,
            (yaml.SafeLoader, *bases),
            {**namespace, "yaml_implicit_resolvers": implicit_resolvers},
        )


class YamlNoTimestampSafeLoader(
    metaclass=YamlLimitedSafeLoader, do_not_resolve={"tag:yaml.org,2002:timestamp"}
):
    """A safe YAML loader that leaves timestamps as strings."""
    pass


class dotdict(dict):
    """
    dot.notation access to dictionary attributes
    """
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            return self.__getattribute__(item)

    @classmethod
    def create(cls, cfg: Any):
        """
        - recursively replace all dicts by the dotdict.
        """
        if isinstance(cfg, dict):
            return cls((k, cls.create(v)) for k, v in cfg.items())
        elif isinstance(cfg, list):
            return [cls.create(i) for i in cfg]
        elif isinstance(cfg, tuple):
            return tuple(cls.create(i) for i in cfg)
        else:
            return cfg

    @staticmethod
    def serialize(cfg):
        if isinstance(cfg, dict):
            return {k: dotdict.serialize(v) for k, v in cfg.items()}
        elif isinstance(cfg, (list, tuple)):
            return [dotdict.serialize(i) for i in cfg]
        else:
            return cfg


Address = Tuple[str, ...]
Variant = Dict[str, Any]


def default_config() -> dotdict:
    return dotdict.create({
        'overflow': {'dtype': 'int64', 'mode': 'raise'},
        'small_bound': SMALL_BOUND,
    })


@dataclass
class PathIter:
    path: Address
    # full address path
    i: int = 0
    # actual level of the path

    def is_leaf(self):
        return self.i == len(self.path)

    def idx(self):
        try:
            return int(self.path[self.i]), PathIter(self.path, self.i + 1)
        except ValueError:
            raise IndexError(f"Variant substitution: IndexError at address: '{self.address()}'.")

    def key(self):
        key = self.path[self.i]
        if len(key) > 0 and not key[0].isdigit():
            return key, PathIter(self.path, self.i + 1)
        else:
            raise KeyError(f"Variant substitution: KeyError at address: '{self.address()}'.")

    def address(self):
        return '/'.join(self.path[:self.i + 1])


def deep_update(cfg, iter: PathIter, substitute):
    """
    Copy of `cfg` with the item at the `iter` address replaced.
    Only the collections on the path are copied.
    """
    if iter.is_leaf():
        return substitute
    if isinstance(cfg, list):
        key, sub_path = iter.idx()
        if not -len(cfg) <= key < len(cfg):
            raise IndexError(f"Variant substitution: IndexError at address: '{iter.address()}'.")
        new_cfg = list(cfg)
    elif isinstance(cfg, dict):
        key, sub_path = iter.key()
        if key not in cfg and not sub_path.is_leaf():
            raise KeyError(f"Variant substitution: KeyError at address: '{iter.address()}'.")
        new_cfg = dotdict(cfg)
    else:
        raise TypeError(f"Variant substitution: Unknown type {type(cfg)} at address: '{iter.address()}'.")
    new_cfg[key] = deep_update(new_cfg[key] if not sub_path.is_leaf() else None, sub_path, substitute)
    return new_cfg


def apply_variant(cfg: dotdict, variant: Variant) -> dotdict:
    """
    In the `variant` dict the keys are interpreted as the address
    in the YAML file. The address is a list of strings and ints separated by '/'
    and representing an item of the YAML file.
    For every `(address, value)` item of the `variant` dict the referenced item
    in `cfg` is replaced by `value`. The original `cfg` is not modified.
    """
    new_cfg = cfg
    for path_str, val in variant.items():
        path = tuple(path_str.split('/'))
        new_cfg = deep_update(new_cfg, PathIter(path), dotdict.create(val))
    return new_cfg


def merge(base, update):
    """
    Recursive merge of two configuration dicts, values of `update` win.
    """
    if not (isinstance(base, dict) and isinstance(update, dict)):
        return update
    result = dotdict(base)
    for k, v in update.items():
        result[k] = merge(base[k], v) if k in base else v
    return dotdict.create(result)


def load_config(path, variant: Variant = None) -> dotdict:
    """
    Load configuration from given file, merge it over the `default_config`
    and apply the `variant` substitutions.
    """
    with open(path) as f:
        cfg = yaml.load(f, Loader=YamlNoTimestampSafeLoader)
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise TypeError(f"Configuration root must be a mapping, get: {type(cfg)} in {path}.")
    cfg['_config_root_dir'] = os.path.abspath(os.path.dirname(path))
    dd = merge(default_config(), dotdict.create(cfg))
    if variant:
        dd = apply_variant(dd, variant)
    logging.info(f"Loaded config: {path}")
    return dd


def dump_config(config, path):
    with open(path, "w") as f:
        yaml.safe_dump(dotdict.serialize(config), f)
