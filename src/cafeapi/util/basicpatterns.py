# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Basic design patterns used across the application."""

from typing import Any

__all__ = ["Singleton"]


class Singleton(type):
    """A metaclass allowing only one instance of its classes.

    The first call to the class creates the instance, next calls return it
    whatever their arguments.
    """

    _instances: dict[type, Any] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]
