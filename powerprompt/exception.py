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

"""Exceptions used by powerprompt.

Fatal errors (bad configuration, unsupported shell) extend C{BaseException}, so an
C{except Exception} clause does not intercept them. They are reported once, by C{powerprompt.main},
which then exits with status 1.

An information source that cannot be queried raises C{SourceUnavailable}. The assembler absorbs it,
and the source simply contributes no segment to the prompt.
"""


# Exception for terminating prompt rendering. By extending BaseException, this exception
# cannot be caught by "except Exception".
class KillPromptException(BaseException):

    def __init__(self, cause):
        super().__init__(cause)
        self.cause = cause

    def __str__(self):
        return str(self.cause)


class ConfigurationException(KillPromptException):

    def __init__(self, path, message):
        super().__init__(f'Invalid configuration in {path}: {message}' if path else
                         f'Invalid configuration: {message}')
        self.path = path


class UnsupportedShellException(KillPromptException):

    def __init__(self, shell):
        super().__init__(f'Shell "{shell}" not supported, use one of: bash, zsh')
        self.shell = shell


# Raised by a probe that cannot obtain its facts, e.g. not in a git repository, no battery.
# The prompt is rendered without the corresponding segment.
class SourceUnavailable(Exception):

    def __init__(self, source, reason):
        super().__init__(f'{source}: {reason}')
        self.source = source
        self.reason = reason
