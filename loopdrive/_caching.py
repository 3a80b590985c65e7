# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

import functools


def cache_with_key(key):
    """
    Cache the result of `func`, using the function `key` to compute
    the key for cache lookup. `key` receives all arguments passed to
    `func`.
    """

    def deco(func):
        cache = {}

        @functools.wraps(func)
        def inner(*args, **kwargs):
            cache_key = key(*args, **kwargs)
            if cache_key not in cache:
                cache[cache_key] = func(*args, **kwargs)
            return cache[cache_key]

        inner.cache_clear = cache.clear
        return inner

    return deco
