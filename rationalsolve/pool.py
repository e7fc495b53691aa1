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
"""Process pool that runs the row elimination step of the reduction engine"""

from multiprocessing.pool import Pool
from multiprocessing import get_context
import os
import sys
import pickle
import logging
from os.path import isfile
from platform import system
from tempfile import mkstemp
from typing import Callable, Optional, Tuple


def _init_win_worker(filename: str) -> None:
    """Retrieve worker initialization code from a pickle file and call it."""
    with open(filename, mode="rb") as handle:
        func, *args = pickle.load(handle)
    func(*args)


def init_worker_logging(level: int) -> None:
    """Give a freshly spawned worker the log level of the parent process"""
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)


class ReductionPool(Pool):
    """Spawn-based process pool for parallel row updates

    Workers are started with the 'spawn' context, so they never inherit a copy
    of the matrix that is being reduced; every row reaches a worker as pickled
    task data. On Windows, initialization code is handed to workers through a
    pickle file instead of the process arguments, see
    https://github.com/opencobra/cobrapy/issues/997.

    While the workers start, the __spec__ and __file__ attributes of the main
    module are hidden, so that spawned interpreters do not re-run the calling
    script.

    Args:
        processes (int):
            Number of worker processes.

        initializer (callable):
            Called once in every worker. Defaults to init_worker_logging with
            the current log level of the root logger.

        initargs (tuple):
            Arguments of the initializer.
    """

    def __init__(self,
                 processes: Optional[int] = None,
                 initializer: Optional[Callable] = None,
                 initargs: Tuple = (),
                 maxtasksperchild: Optional[int] = None,
                 context=None):
        self._filename = None
        if initializer is None:
            initializer = init_worker_logging
            initargs = (logging.getLogger().getEffectiveLevel(),)
        if system() == "Windows":
            descriptor, self._filename = mkstemp(suffix=".pkl")
            with os.fdopen(descriptor, mode="wb") as handle:
                pickle.dump((initializer,) + tuple(initargs), handle)
            initializer = _init_win_worker
            initargs = (self._filename,)
        main = sys.modules['__main__']
        spec = getattr(main, '__spec__', None)
        file = getattr(main, '__file__', None)
        if context is None:
            context = get_context('spawn')
            if spec:
                main.__spec__ = None
            if file:
                main.__file__ = None
        try:
            super().__init__(
                processes=processes,
                initializer=initializer,
                initargs=initargs,
                maxtasksperchild=maxtasksperchild,
                context=context,
            )
        finally:
            if spec:
                main.__spec__ = spec
            if file:
                main.__file__ = file
        logging.debug('Started reduction pool with ' + str(self._processes) + ' processes.')

    def __exit__(self, *args, **kwargs):
        """Clean up resources when leaving a context"""
        self._clean_up()
        super().__exit__(*args, **kwargs)

    def close(self):
        """Call cleanup function and close"""
        self._clean_up()
        super().close()

    def _clean_up(self):
        """Remove the initializer dump file if it exists"""
        if self._filename is not None and isfile(self._filename):
            os.remove(self._filename)
