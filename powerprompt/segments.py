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

"""Segment builders turn facts into segments.

There is one builder per information source. Each takes a fact record (or a plain value) and the
L{powerprompt.theme.Theme}, and returns a list of zero or more L{Segment}s. Builders have no side
effects and do no I/O: facts are gathered beforehand by C{powerprompt.probe}.
"""

import powerprompt.object.color
import powerprompt.object.facts
import powerprompt.object.segment
import powerprompt.util

Color = powerprompt.object.color.Color
ColorPair = powerprompt.object.color.ColorPair
Part = powerprompt.object.segment.Part
Segment = powerprompt.object.segment.Segment
PathState = powerprompt.object.facts.PathState

# Used only when segments are sorted by weight. Higher weights are drawn first.
WEIGHTS = {
    'hostname': 60,
    'virtualenv': 50,
    'cwd': 40,
    'lock': 35,
    'git': 30,
    'hg': 30,
    'returncode': 20,
    'battery': 10,
    'dollar': Segment.DOLLAR_WEIGHT
}


def count_text(count, icon):
    return icon if count == 1 else f'{count}{icon}'


# cwd

def path_segments(path, theme, max_length=0):
    colors = theme.colors
    ellipsis = theme.icons.ellipsis
    weight = WEIGHTS['cwd']

    def component(name):
        return Part(powerprompt.util.truncate(name, max_length, ellipsis), requires_escaping=True)

    if path.is_root():
        return [Segment(colors.cwd, [Part('/', requires_escaping=True)], weight)]
    segments = []
    components = path.components
    if path.under_home:
        segments.append(Segment(colors.cwd_home, [Part(PathState.HOME, requires_escaping=True)], weight))
        components = components[1:]
    if components:
        *intermediate, leaf = components
        parts = [component(name) for name in intermediate[:1]]
        if len(intermediate) > 1:
            parts.append(Part(ellipsis))
        parts.append(component(leaf))
        segments.append(Segment(colors.cwd, parts, weight))
    return segments


# Version control

def branch_text(status, icons):
    if status.detached:
        text = f'{icons.detached} {status.branch}'
    elif status.branch == status.TRUNK:
        text = status.branch
    else:
        text = f'{icons.branch} {status.branch}'
    bookmark = getattr(status, 'bookmark', None)
    if bookmark:
        text = f'{text} {bookmark}'
    return text


def distance_text(status, icons):
    distances = []
    if status.ahead:
        distances.append(count_text(status.ahead, icons.ahead))
    if status.behind:
        distances.append(count_text(status.behind, icons.behind))
    return ' '.join(distances)


def vcs_segments(status, theme, default_colors, changed_colors, weight):
    """Returns a single segment describing the state of a working copy.

    The segment has the changed colors if there is anything to commit, push or pull. Parts, in order:
    branch, ahead/behind, phases (hg only), then counts of added, modified, untracked, removed,
    conflicted and renamed files. Only nonzero counts produce a part.
    """
    icons = theme.icons
    colors = changed_colors if status.changed() else default_colors
    texts = [branch_text(status, icons), distance_text(status, icons)]
    phases = getattr(status, 'phases', 0)
    if phases:
        texts.append(count_text(phases, icons.phases))
    for count, icon in ((status.added, icons.added),
                        (status.modified, icons.modified),
                        (status.untracked, icons.untracked),
                        (status.removed, icons.removed),
                        (status.conflicted, icons.conflicted),
                        (status.renamed, icons.renamed)):
        if count:
            texts.append(count_text(count, icon))
    parts = [Part(text, requires_escaping=True) for text in texts if text]
    return [Segment(colors, parts, weight)]


def git_segments(status, theme):
    return vcs_segments(status,
                        theme,
                        theme.colors.git_default,
                        theme.colors.git_changed,
                        WEIGHTS['git'])


def hg_segments(status, theme):
    return vcs_segments(status,
                        theme,
                        theme.colors.hg_default,
                        theme.colors.hg_changed,
                        WEIGHTS['hg'])


# Simple segments: at most one segment, with one part.

def virtualenv_segments(name, theme):
    if not name:
        return []
    return [Segment(theme.colors.virtualenv, [Part(name, requires_escaping=True)], WEIGHTS['virtualenv'])]


def lock_segments(writable, theme):
    if writable:
        return []
    return [Segment(theme.colors.lock, [Part(theme.icons.read_only)], WEIGHTS['lock'])]


def return_code_segments(return_code, theme):
    if return_code == 0:
        return []
    return [Segment(theme.colors.returncode, [Part(str(return_code))], WEIGHTS['returncode'])]


# A warning threshold of 0 turns the warning off.
def battery_segments(battery, theme, warn_threshold):
    if warn_threshold <= 0 or battery.capacity > warn_threshold:
        return []
    return [Segment(theme.colors.battery, [Part(f'{battery.capacity}%')], WEIGHTS['battery'])]


def hostname_segments(host, theme, max_length=0, colorize=False):
    """Hostname, shortened like a path component, preceded by C{user@} if the username is known.

    If colorize is true, the background is derived from the hostname, so that each host gets
    its own, stable, color.
    """
    text = powerprompt.util.truncate(host.hostname, max_length, theme.icons.ellipsis)
    if host.username:
        text = f'{host.username}@{text}'
    colors = theme.colors.hostname
    if colorize:
        colors = ColorPair(colors.foreground, Color(powerprompt.util.hash_color(host.hostname)))
    return [Segment(colors, [Part(text, requires_escaping=True)], WEIGHTS['hostname'])]


def dollar_segments(theme):
    return [Segment(theme.colors.dollar, [Part(theme.dollar())], WEIGHTS['dollar'])]
