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

import powerprompt.exception

VERSION = '0.3.0'


def _kill_prompt(message):
    raise powerprompt.exception.KillPromptException(message)


def major_minor(version=VERSION):
    if type(version) is not str:
        _kill_prompt(f'Version number not a string: {version}')
    version_parts = version.split('.')
    if len(version_parts) != 3:
        _kill_prompt(f'Incorrectly formatted version number: {version}')
    for part in version_parts:
        if not part.isdigit():
            _kill_prompt(f'Invalid version number: {version}')
    return '.'.join(version_parts[:2])


def build_identifier():
    return f'powerprompt {VERSION} ({major_minor()})'
