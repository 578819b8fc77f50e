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

import powerprompt.exception
import powerprompt.object.segment
import powerprompt.probe
import powerprompt.segments
import powerprompt.util

SourceUnavailable = powerprompt.exception.SourceUnavailable


class Sources(object):
    """Access to the information sources, via the probes.

    Tests replace this with an object returning canned facts.
    """

    def __init__(self, environ=None, cwd=None, timeout=2):
        self.environ = os.environ if environ is None else environ
        self._cwd = cwd
        self.timeout = timeout

    def __repr__(self):
        return f'Sources(cwd={self._cwd})'

    def cwd(self):
        if self._cwd is None:
            self._cwd = powerprompt.probe.current_dir()
        return self._cwd

    def path(self):
        return powerprompt.probe.path_state(self.cwd(), self.environ.get('HOME'))

    def virtualenv(self):
        return powerprompt.probe.virtualenv_name(self.environ)

    def remote(self):
        return powerprompt.probe.is_remote(self.environ)

    def writable(self):
        return powerprompt.probe.is_writable(self.cwd())

    def host(self, with_username):
        return powerprompt.probe.host_state(with_username)

    def battery(self):
        return powerprompt.probe.battery_state()

    def git(self):
        return powerprompt.probe.git_status(self.cwd(), self.timeout)

    def hg(self):
        return powerprompt.probe.hg_status(self.cwd(), self.timeout)


class Assembler(object):
    """Runs the enabled segment builders, and collects their segments.

    Builders run in a fixed order, which is also the left-to-right order of the prompt:
    virtualenv, hostname (remote sessions only), cwd, lock, git, hg, return code, battery, dollar.
    If the configuration asks for it, segments are instead ordered by weight, which keeps
    the dollar segment last.
    """

    def __init__(self, configuration, theme, sources, return_code=0):
        self.configuration = configuration
        self.theme = theme
        self.sources = sources
        self.return_code = return_code

    def __repr__(self):
        return f'Assembler({self.sources}, return_code={self.return_code})'

    def segments(self):
        segments = []
        for name, build in self.builders():
            try:
                segments.extend(build())
            except SourceUnavailable as e:
                powerprompt.util.trace(f'No {name} segment: {e}')
        if self.configuration.sort_by_weight:
            segments = powerprompt.object.segment.sort_segments(segments)
        return segments

    # Returns (name, builder) pairs, in prompt order, for the enabled sources.
    def builders(self):
        configuration = self.configuration
        theme = self.theme
        sources = self.sources
        builders = []
        if configuration.show_virtualenv:
            builders.append(('virtualenv',
                             lambda: powerprompt.segments.virtualenv_segments(sources.virtualenv(), theme)))
        if configuration.show_hostname and sources.remote():
            builders.append(('hostname',
                             lambda: powerprompt.segments.hostname_segments(
                                 sources.host(configuration.show_username),
                                 theme,
                                 configuration.hostname_max_length,
                                 configuration.colorize_hostname)))
        if configuration.show_cwd:
            builders.append(('cwd',
                             lambda: powerprompt.segments.path_segments(sources.path(),
                                                                        theme,
                                                                        configuration.cwd_max_length)))
        if configuration.show_writable:
            builders.append(('lock',
                             lambda: powerprompt.segments.lock_segments(sources.writable(), theme)))
        if configuration.show_git:
            builders.append(('git',
                             lambda: powerprompt.segments.git_segments(sources.git(), theme)))
        if configuration.show_hg:
            builders.append(('hg',
                             lambda: powerprompt.segments.hg_segments(sources.hg(), theme)))
        if configuration.show_return_code:
            builders.append(('returncode',
                             lambda: powerprompt.segments.return_code_segments(self.return_code, theme)))
        if configuration.show_battery and configuration.battery_warn > 0:
            builders.append(('battery',
                             lambda: powerprompt.segments.battery_segments(sources.battery(),
                                                                           theme,
                                                                           configuration.battery_warn)))
        builders.append(('dollar',
                         lambda: powerprompt.segments.dollar_segments(theme)))
        return builders
