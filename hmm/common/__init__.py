"""Common utilities shared by the lookup and generation tools."""

from hmm.common.utils import (
    is_cjk_char,
    keep_only_cjk,
    unique_preserve_order,
    simplified_to_traditional,
    _load_env_file,
)
from hmm.common.cache import (
    sanitize_filename,
    cache_key,
    SceneCache,
)
from hmm.common.logging import (
    log_debug,
    log_warn,
    log_error,
)

__all__ = [
    # utils
    "is_cjk_char",
    "keep_only_cjk",
    "unique_preserve_order",
    "simplified_to_traditional",
    "_load_env_file",
    # cache
    "sanitize_filename",
    "cache_key",
    "SceneCache",
    # logging
    "log_debug",
    "log_warn",
    "log_error",
]
