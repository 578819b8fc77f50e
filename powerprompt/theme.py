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

"""Glyphs, colors and shell escape templates used to draw a prompt.

A L{Theme} is assembled once, by L{powerprompt.config.Configuration.theme}, from compiled-in
defaults overridden by the user's configuration file. It cannot be modified afterwards, and is
passed explicitly to the segment builders and to the renderer.
"""

import powerprompt.exception
import powerprompt.object.color


class FrozenError(AttributeError):
    pass


class Frozen(object):

    def __setattr__(self, key, value):
        if self.__dict__.get('_frozen', False):
            raise FrozenError(f'Cannot modify {type(self).__name__}.{key}')
        self.__dict__[key] = value

    def freeze(self):
        self._frozen = True
        return self


class Icons(Frozen):

    KEYS = ('branch',
            'ahead',
            'behind',
            'added',
            'modified',
            'removed',
            'untracked',
            'renamed',
            'conflicted',
            'detached',
            'phases',
            'read_only',
            'ellipsis',
            'separator',
            'separator_thin',
            'dollar')

    PLAIN = {
        'branch': '☇',
        'ahead': '⇑',
        'behind': '⇓',
        'added': '✔',
        'modified': '✎',
        'removed': '✖',
        'untracked': '⚐',
        'renamed': '☈',
        'conflicted': '‼',
        'detached': '✂',
        'phases': '+',
        'read_only': '⊗',
        'ellipsis': '…',
        'separator': '',
        'separator_thin': '/',
        # None: use the shell's own prompt character, see ShellTemplates.dollar
        'dollar': None,
    }

    FANCY = dict(PLAIN,
                 branch='\ue0a0',
                 separator='\ue0b0',
                 separator_thin='\ue0b1')

    def __init__(self, **icons):
        for key in Icons.KEYS:
            setattr(self, key, icons.get(key))
        self.freeze()

    def __repr__(self):
        return 'Icons(' + ', '.join(f'{k}={getattr(self, k)!r}' for k in Icons.KEYS) + ')'

    @staticmethod
    def defaults(fancy):
        return dict(Icons.FANCY if fancy else Icons.PLAIN)


class Colors(Frozen):

    KEYS = ('git_default',
            'git_changed',
            'hg_default',
            'hg_changed',
            'cwd',
            'cwd_home',
            'virtualenv',
            'returncode',
            'lock',
            'dollar',
            'battery',
            'hostname')

    def __init__(self, **pairs):
        for key in Colors.KEYS:
            pair = pairs[key]
            assert isinstance(pair, powerprompt.object.color.ColorPair), (key, pair)
            setattr(self, key, pair)
        self.freeze()

    def __repr__(self):
        return 'Colors(' + ', '.join(f'{k}={getattr(self, k)}' for k in Colors.KEYS) + ')'


class ShellTemplates(Frozen):

    FOREGROUND = 38
    BACKGROUND = 48

    def __init__(self, shell, sh, color, reset, bold, dollar, set_title):
        self.shell = shell
        # Wraps an escape sequence so that the shell does not count it toward the prompt width.
        self.sh = sh
        # Formatted with (FOREGROUND or BACKGROUND, palette index).
        self.color = color
        self.reset = reset
        self.bold = bold
        self.dollar = dollar
        self.set_title = set_title
        self.freeze()

    def __repr__(self):
        return f'ShellTemplates({self.shell})'

    def foreground(self, color):
        return self.sh % (self.color % (ShellTemplates.FOREGROUND, color.code))

    def background(self, color):
        return self.sh % (self.color % (ShellTemplates.BACKGROUND, color.code))

    @staticmethod
    def for_shell(shell):
        try:
            return SHELLS[shell]
        except KeyError:
            raise powerprompt.exception.UnsupportedShellException(shell)


SHELLS = {
    'bash': ShellTemplates(shell='bash',
                           sh='\\[\\e%s\\]',
                           color='[%03d;5;%03dm',
                           reset='\\[\\e[0m\\]',
                           bold='\\[\\e[1m\\]',
                           dollar='\\$',
                           set_title='\\[\\e]0;\\u@\\h: \\w\\a\\]'),
    # Literal %'s are doubled in color, which is formatted before sh.
    'zsh': ShellTemplates(shell='zsh',
                          sh='%s',
                          color='%%{\x1b[%d;5;%dm%%}',
                          reset='%{%k%f%}',
                          bold='%{\x1b[1m%}',
                          dollar='%#',
                          set_title='%{\x1b]0;%n@%m: %~\x07%}')
}


class Theme(Frozen):

    def __init__(self, icons, colors, templates):
        self.icons = icons
        self.colors = colors
        self.templates = templates
        self.freeze()

    def __repr__(self):
        return f'Theme({self.templates.shell}, {self.icons}, {self.colors})'

    def dollar(self):
        return self.templates.dollar if self.icons.dollar is None else self.icons.dollar
