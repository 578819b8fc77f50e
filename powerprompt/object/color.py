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

import powerprompt.util


class ColorError(ValueError):
    pass


class Color(object):
    """An entry of the 256-color terminal palette."""

    def __init__(self, code):
        if type(code) is not int or code < 0 or code >= powerprompt.util.PALETTE_SIZE:
            raise ColorError(f'Bad color definition: {code!r}, expected a palette index 0-255')
        # See https://unix.stackexchange.com/questions/124407/what-color-codes-can-i-use-in-my-ps1-prompt
        self.code = code

    def __repr__(self):
        return f'Color({self.code})'

    def __hash__(self):
        return self.code

    def __eq__(self, other):
        return isinstance(other, Color) and self.code == other.code

    def __ne__(self, other):
        return not self == other

    # Configuration files may contain ints or numeric strings, e.g. 17 or "017".
    @staticmethod
    def parse(value):
        if isinstance(value, Color):
            return value
        if type(value) is str:
            text = value.strip()
            if not text.isdigit():
                raise ColorError(f'Bad color definition: {value!r}, expected a palette index 0-255')
            value = int(text)
        return Color(value)


class ColorPair(object):

    def __init__(self, foreground, background):
        self.foreground = Color.parse(foreground)
        self.background = Color.parse(background)

    def __repr__(self):
        return f'ColorPair(fg={self.foreground.code}, bg={self.background.code})'

    def __eq__(self, other):
        return (isinstance(other, ColorPair) and
                self.foreground == other.foreground and
                self.background == other.background)

    def __hash__(self):
        return hash((self.foreground, self.background))
