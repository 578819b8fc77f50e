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

"""Probes gather facts about the environment in which the prompt is displayed.

Each probe returns a fact record from C{powerprompt.object.facts}, or a simple value, and raises
C{SourceUnavailable} when the information cannot be obtained (not in a repository, VCS not installed,
no battery, timeout). Probes are run sequentially, each external command bounded by a timeout.
"""

import getpass
import os
import re
import socket
import subprocess

import psutil

import powerprompt.exception
import powerprompt.object.facts
import powerprompt.util

SourceUnavailable = powerprompt.exception.SourceUnavailable
GitStatus = powerprompt.object.facts.GitStatus
HgStatus = powerprompt.object.facts.HgStatus

FANCY_ENV_VAR = 'POWERPROMPT_FANCY'


# Environment

def current_dir():
    try:
        return os.getcwd()
    except FileNotFoundError:
        # The current directory has been removed. The shell still knows where it was.
        pwd = os.environ.get('PWD')
        if pwd:
            return pwd
        raise SourceUnavailable('cwd', 'current directory does not exist')


def path_state(cwd, home):
    return powerprompt.object.facts.PathState.from_path(cwd, home)


def virtualenv_name(environ):
    virtualenv = environ.get('VIRTUAL_ENV')
    return os.path.basename(virtualenv.rstrip('/')) if virtualenv else None


def is_remote(environ):
    return bool(environ.get('SSH_CLIENT'))


def wants_title(environ):
    term = environ.get('TERM', '')
    return 'xterm' in term or 'rxvt' in term


def fancy(environ):
    return environ.get(FANCY_ENV_VAR, '').lower() not in ('', '0', 'false', 'no')


# Filesystem, host, battery

# A directory that can't be checked is reported as writable, so that a failed check
# doesn't produce a lock icon.
def is_writable(directory):
    try:
        return os.access(directory, os.W_OK)
    except (OSError, ValueError) as e:
        powerprompt.util.trace(f'Writability check of {directory} failed: {e}')
        return True


def host_state(with_username=False):
    try:
        hostname = socket.gethostname()
    except OSError as e:
        raise SourceUnavailable('hostname', str(e))
    if not hostname:
        raise SourceUnavailable('hostname', 'no hostname')
    username = None
    if with_username:
        try:
            username = getpass.getuser()
        except (KeyError, OSError) as e:
            powerprompt.util.trace(f'Unable to determine username: {e}')
    return powerprompt.object.facts.HostState(hostname, username)


def battery_state():
    try:
        battery = psutil.sensors_battery()
    except (AttributeError, NotImplementedError, OSError) as e:
        # AttributeError: sensors_battery is not provided on every platform.
        raise SourceUnavailable('battery', str(e))
    if battery is None:
        raise SourceUnavailable('battery', 'no battery')
    return powerprompt.object.facts.BatteryState(int(round(battery.percent)))


# Version control

def run(source, command, cwd, timeout):
    powerprompt.util.trace(f'{source}: running {" ".join(command)} in {cwd}')
    env = dict(os.environ)
    env['LANG'] = 'C'
    env['LC_ALL'] = 'C'
    try:
        process = subprocess.run(command,
                                 cwd=cwd,
                                 env=env,
                                 stdin=subprocess.DEVNULL,
                                 capture_output=True,
                                 text=True,
                                 encoding='utf-8',
                                 errors='replace',
                                 timeout=timeout)
    except FileNotFoundError:
        raise SourceUnavailable(source, f'{command[0]} is not installed')
    except subprocess.TimeoutExpired:
        raise SourceUnavailable(source, f'{" ".join(command)} timed out after {timeout} sec')
    except OSError as e:
        raise SourceUnavailable(source, str(e))
    if process.returncode != 0:
        raise SourceUnavailable(source, process.stderr.strip() or f'exit status {process.returncode}')
    return process.stdout


class GitStatusParser(object):
    """Parses the output of C{git status --porcelain --branch}.

    The first line describes the branch::

        ## master...origin/master [ahead 2, behind 1]
        ## HEAD (no branch)
        ## No commits yet on master

    Each remaining line has a two-letter status code (index, work tree) followed by a path.
    """

    BRANCH = re.compile(r'^## (?:No commits yet on |Initial commit on )?(?P<branch>\S+?)'
                        r'(?:\.\.\.(?P<upstream>\S+))?(?: \[(?P<distance>[^\]]+)\])?$')
    DETACHED = '## HEAD (no branch)'
    AHEAD = re.compile(r'ahead (\d+)')
    BEHIND = re.compile(r'behind (\d+)')
    CONFLICTED = {'DD', 'AU', 'UD', 'UA', 'DU', 'AA', 'UU'}

    def __init__(self, output):
        self.lines = [line for line in output.split('\n') if line]

    def parse(self):
        branch = None
        ahead = 0
        behind = 0
        detached = False
        counts = {'added': 0, 'modified': 0, 'removed': 0, 'untracked': 0, 'renamed': 0, 'conflicted': 0}
        for line in self.lines:
            if line.startswith('##'):
                if line.startswith(GitStatusParser.DETACHED):
                    detached = True
                else:
                    match = GitStatusParser.BRANCH.match(line)
                    if match:
                        branch = match.group('branch')
                        distance = match.group('distance') or ''
                        ahead = self.distance(GitStatusParser.AHEAD, distance)
                        behind = self.distance(GitStatusParser.BEHIND, distance)
            else:
                for category in GitStatusParser.categories(line[:2]):
                    counts[category] += 1
        return GitStatus(branch, ahead=ahead, behind=behind, detached=detached, **counts)

    @staticmethod
    def distance(pattern, text):
        match = pattern.search(text)
        return int(match.group(1)) if match else 0

    # A file may fall into more than one category, e.g. DD is both conflicted and removed.
    @staticmethod
    def categories(code):
        if code == '??':
            return ['untracked']
        categories = []
        if code in GitStatusParser.CONFLICTED:
            categories.append('conflicted')
        for letters, category in (('A', 'added'),
                                  ('MT', 'modified'),
                                  ('D', 'removed'),
                                  ('RC', 'renamed')):
            if any(c in letters for c in code):
                categories.append(category)
        return categories


def git_status(cwd, timeout):
    output = run('git', ['git', 'status', '--porcelain', '--branch', '--ignore-submodules'], cwd, timeout)
    status = GitStatusParser(output).parse()
    if status.detached:
        status.branch = run('git', ['git', 'rev-parse', '--short', 'HEAD'], cwd, timeout).strip()
    if not status.branch:
        raise SourceUnavailable('git', 'unable to determine branch')
    return status


class HgStatusParser(object):
    """Parses the output of C{hg status}: one line per file, a status letter and a path."""

    CATEGORIES = {
        'A': 'added',
        'M': 'modified',
        'R': 'removed',
        '!': 'removed',
        '?': 'untracked'
    }

    def __init__(self, output):
        self.lines = [line for line in output.split('\n') if line]

    def parse(self, branch, phases=0, bookmark=None):
        counts = {'added': 0, 'modified': 0, 'removed': 0, 'untracked': 0}
        for line in self.lines:
            category = HgStatusParser.CATEGORIES.get(line[0])
            if category:
                counts[category] += 1
        return HgStatus(branch, phases=phases, bookmark=bookmark, **counts)


def hg_status(cwd, timeout):
    branch = run('hg', ['hg', 'branch'], cwd, timeout).strip()
    if not branch:
        raise SourceUnavailable('hg', 'unable to determine branch')
    output = run('hg', ['hg', 'status'], cwd, timeout)
    # Draft (not yet published) changesets leading to the working copy.
    phases = len(run('hg', ['hg', 'log', '-r', 'draft() and ancestors(.)', '--template', 'x'], cwd, timeout))
    try:
        bookmark = run('hg', ['hg', 'log', '-r', '.', '--template', '{activebookmark}'], cwd, timeout).strip()
    except SourceUnavailable as e:
        powerprompt.util.trace(f'No bookmark: {e}')
        bookmark = None
    return HgStatusParser(output).parse(branch, phases=phases, bookmark=bookmark or None)
