# This file is part of Powerprompt.
#
# Powerprompt is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation, either version 3 of the License, (or at your
# option) any later version.
#
# Powerprompt is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# for more details.
#
# You should have received a copy of the GNU General Public License
# along with Powerprompt.  If not, see <https://www.gnu.org/licenses/>.

import os
import pathlib
import re
import sys
import traceback

# Characters that the shell would expand when the prompt string is evaluated.
SHELL_METACHARACTERS = re.compile(r'([$&\\`!])')

PALETTE_SIZE = 256

TRACE_ENV_VAR = 'POWERPROMPT_TRACE'


def escape(text):
    return SHELL_METACHARACTERS.sub(r'\\\1', text)


# Shorten text that is longer than max_length to first half + ellipsis + last half.
# Each half is max_length // 2 - 1 characters long. No truncation for max_length <= 3,
# there is no room for anything but the ellipsis.
def truncate(text, max_length, ellipsis):
    if max_length <= 3 or len(text) <= max_length:
        return text
    half = max_length // 2 - 1
    return text[:half] + ellipsis + text[-half:]


def hash_color(text, palette_size=PALETTE_SIZE):
    return sum(ord(c) for c in text) % palette_size


def print_stack_of_current_exception(file=None):
    if file is None:
        file = sys.__stderr__
    exception_type, exception, trace = sys.exc_info()
    print(f'Caught {exception_type}: {exception}', file=file)
    traceback.print_tb(trace, file=file)
    file.flush()


# Utility to print to stderr, flushing stdout first, to minimize weird ordering due to buffering.
def print_to_stderr(message):
    sys.stdout.flush()
    print(message, file=sys.stderr, flush=True)


class Trace(object):

    def __init__(self, tracefile):
        self.path = pathlib.Path(tracefile)
        self.path.touch(exist_ok=True)

    def __repr__(self):
        return f'Trace({self.path})'

    def write(self, line):
        with self.path.open(mode='a') as file:
            print(f'{os.getpid()}: {line}', file=file, flush=True)

    # Caller is responsible for closing, e.g. with TRACE.open(...) as file ...
    def open(self):
        return self.path.open(mode='a')


_TRACE = None


def tracer():
    global _TRACE
    tracefile = os.environ.get(TRACE_ENV_VAR)
    if not tracefile:
        _TRACE = None
    elif _TRACE is None or _TRACE.path != pathlib.Path(tracefile):
        try:
            _TRACE = Trace(tracefile)
        except OSError as e:
            print_to_stderr(f'Unable to trace to {tracefile}: {e}')
            _TRACE = None
    return _TRACE


def trace(line):
    t = tracer()
    if t:
        t.write(line)


def trace_current_exception():
    t = tracer()
    if t:
        with t.open() as file:
            print_stack_of_current_exception(file)
