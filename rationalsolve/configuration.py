#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Package wide settings for the reduction engine (Configuration)"""

from typing import Optional
import os
import logging
import psutil


def _default_processes() -> int:
    """Physical cores if psutil can tell, logical cores otherwise"""
    count = psutil.cpu_count(logical=False)
    if not count:
        count = psutil.cpu_count(logical=True) or os.cpu_count()
    return max(1, count or 1)


class Configuration(object):
    """Process wide defaults for the reduction engine

    There is only one Configuration object. Every call of Configuration()
    returns the same instance, so changing a field changes the default for all
    subsequent reductions. Single calls can override the defaults with the
    keyword arguments 'processes' and 'parallel_min_rows'.

    Attributes:
        processes (int):
            Number of worker processes used for the row elimination step. A
            value of 1 disables the process pool.

        parallel_min_rows (int):
            Matrices with fewer rows are always reduced sequentially, because
            the cost of shipping rows to workers outweighs the gain.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._processes = _default_processes()
            instance._parallel_min_rows = 300
            cls._instance = instance
        return cls._instance

    @property
    def processes(self) -> int:
        return self._processes

    @processes.setter
    def processes(self, value: Optional[int]):
        if value is None:
            value = _default_processes()
        value = int(value)
        if value < 1:
            raise ValueError(f"Number of processes must be positive, got {value}.")
        logging.debug('Setting number of processes to ' + str(value) + '.')
        self._processes = value

    @property
    def parallel_min_rows(self) -> int:
        return self._parallel_min_rows

    @parallel_min_rows.setter
    def parallel_min_rows(self, value: int):
        value = int(value)
        if value < 0:
            raise ValueError(f"Row threshold must not be negative, got {value}.")
        self._parallel_min_rows = value

    def __repr__(self) -> str:
        return f"Configuration(processes={self._processes}, parallel_min_rows={self._parallel_min_rows})"
