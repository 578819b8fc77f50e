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

import powerprompt.object.color


class Part(object):
    """One piece of text inside a segment.

    Parts of a segment share the segment's colors, and are divided by the thin separator.
    requires_escaping marks text obtained from outside (branch names, directory names, hostnames),
    which must be escaped before the shell sees it.
    """

    def __init__(self, text, weight=0, requires_escaping=False):
        assert isinstance(text, str), text
        self.text = text
        self.weight = weight
        self.requires_escaping = requires_escaping

    def __repr__(self):
        dirty = ', escape' if self.requires_escaping else ''
        weight = f', weight={self.weight}' if self.weight else ''
        return f'Part({self.text!r}{weight}{dirty})'

    def __eq__(self, other):
        return (isinstance(other, Part) and
                self.text == other.text and
                self.weight == other.weight and
                self.requires_escaping == other.requires_escaping)

    def __hash__(self):
        return hash((self.text, self.weight, self.requires_escaping))


class Segment(object):
    """A colored chip of the prompt, containing one or more parts."""

    # The trailing prompt marker sorts after everything else.
    DOLLAR_WEIGHT = -(2 ** 31)

    def __init__(self, colors, parts, weight=0):
        assert isinstance(colors, powerprompt.object.color.ColorPair), colors
        parts = list(parts)
        assert len(parts) > 0, 'Segment must have at least one part'
        for part in parts:
            assert isinstance(part, Part), part
        self.foreground = colors.foreground
        self.background = colors.background
        self.parts = parts
        self.weight = weight

    def __repr__(self):
        parts = ', '.join(repr(part) for part in self.parts)
        return (f'Segment(fg={self.foreground.code}, bg={self.background.code}, '
                f'weight={self.weight}, [{parts}])')

    def __eq__(self, other):
        return (isinstance(other, Segment) and
                self.foreground == other.foreground and
                self.background == other.background and
                self.weight == other.weight and
                self.parts == other.parts)

    def __hash__(self):
        return hash((self.foreground, self.background, self.weight, tuple(self.parts)))

    def texts(self):
        return [part.text for part in self.parts]

    # Parts with higher weight first. sorted() is stable, so equal weights keep their order.
    def sorted_parts(self):
        return sorted(self.parts, key=lambda part: -part.weight)


# Segments with higher weight first, preserving insertion order among equal weights.
def sort_segments(segments):
    return sorted(segments, key=lambda segment: -segment.weight)
