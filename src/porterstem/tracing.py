# Copyright 2007 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

"""
Tracers observe the stemmer's phases without changing its output. A tracer is
any callable taking ``(phase_name, before, after)``; pass one to
:func:`porterstem.porter.stem` or to :class:`porterstem.stemmer.Stemmer`.

>>> from porterstem import stem
>>> tracer = CollectingTracer()
>>> stem("hopping", tracer=tracer)
'hop'
>>> tracer.changed()
[('step_1b', 'hopping', 'hop')]
"""

import logging
from typing import List, Tuple


class LoggingTracer:
    """
    Logs every phase of every stemmed word as a log entry.
    """

    def __init__(self, logger: logging.Logger=None, level: int=logging.DEBUG,
                 changes_only: bool=False):
        """
        :param logger: the logger to use. If omitted, the "porterstem.porter"
            logger is used.
        :param level: the level to log phase entries at.
        :param changes_only: if True, only log phases that changed the word.
        """

        if logger is None:
            logger = logging.getLogger("porterstem.porter")
        self.logger = logger
        self.level = level
        self.changes_only = changes_only

    def __call__(self, phase: str, before: str, after: str):
        if self.changes_only and before == after:
            return
        self.logger.log(self.level, "%s: %r -> %r", phase, before, after)


class CollectingTracer:
    """
    Records ``(phase, before, after)`` triples in the ``steps`` list.
    """

    def __init__(self):
        self.steps = []  # type: List[Tuple[str, str, str]]

    def __call__(self, phase: str, before: str, after: str):
        self.steps.append((phase, before, after))

    def __len__(self):
        return len(self.steps)

    def changed(self) -> List[Tuple[str, str, str]]:
        return [step for step in self.steps if step[1] != step[2]]

    def clear(self):
        del self.steps[:]
