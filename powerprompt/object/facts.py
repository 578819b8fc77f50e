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

"""Facts gathered from the environment, one record per information source.

Records are produced by C{powerprompt.probe} and consumed by C{powerprompt.segments}. They are
not retained beyond the rendering of one prompt.
"""


class PathState(object):

    HOME = '~'

    # components: path components, left to right. If the path is under the home directory,
    # the first component is HOME. The root directory has no components.
    def __init__(self, components, under_home=False):
        self.components = list(components)
        self.under_home = under_home
        if under_home:
            assert len(self.components) > 0 and self.components[0] == PathState.HOME, self.components

    def __repr__(self):
        return f'PathState({self.components}, under_home={self.under_home})'

    def is_root(self):
        return len(self.components) == 0

    @staticmethod
    def from_path(path, home=None):
        path = str(path)
        home = str(home).rstrip('/') if home else None
        if home and (path == home or path.startswith(home + '/')):
            rest = path[len(home):]
            return PathState([PathState.HOME] + [c for c in rest.split('/') if c], under_home=True)
        return PathState([c for c in path.split('/') if c])


class VcsStatus(object):

    def __init__(self,
                 branch,
                 ahead=0,
                 behind=0,
                 added=0,
                 modified=0,
                 removed=0,
                 untracked=0,
                 renamed=0,
                 conflicted=0,
                 detached=False):
        self.branch = branch
        self.ahead = ahead
        self.behind = behind
        self.added = added
        self.modified = modified
        self.removed = removed
        self.untracked = untracked
        self.renamed = renamed
        self.conflicted = conflicted
        self.detached = detached

    def __repr__(self):
        counts = ', '.join(f'{k}={v}' for k, v in self.__dict__.items() if k != 'branch' and v)
        return f'{type(self).__name__}({self.branch!r}{", " if counts else ""}{counts})'

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def changed(self):
        return any((self.added,
                    self.modified,
                    self.removed,
                    self.untracked,
                    self.renamed,
                    self.conflicted,
                    self.ahead,
                    self.behind))


class GitStatus(VcsStatus):

    TRUNK = 'master'


class HgStatus(VcsStatus):

    TRUNK = 'default'

    def __init__(self, branch, phases=0, bookmark=None, **kwargs):
        super().__init__(branch, **kwargs)
        self.phases = phases
        self.bookmark = bookmark


class BatteryState(object):

    def __init__(self, capacity):
        self.capacity = capacity

    def __repr__(self):
        return f'BatteryState({self.capacity}%)'


class HostState(object):

    def __init__(self, hostname, username=None):
        self.hostname = hostname
        self.username = username

    def __repr__(self):
        return f'HostState({self.username}@{self.hostname})' if self.username else f'HostState({self.hostname})'
