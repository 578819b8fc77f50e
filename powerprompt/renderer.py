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


class Renderer(object):
    """Draws segments as a string of text and shell escape sequences.

    Each part is drawn, padded by a space on each side, in its segment's colors. Parts of one segment
    are divided by the thin separator. A segment ends with the full separator, drawn in the segment's
    background color, on the next segment's background, or on the terminal's own background after
    the last segment.
    """

    def __init__(self, theme, set_title=False, bold=False):
        self.theme = theme
        self.set_title = set_title
        self.bold = bold

    def __repr__(self):
        return f'Renderer({self.theme.templates.shell}, set_title={self.set_title}, bold={self.bold})'

    def render(self, segments):
        templates = self.theme.templates
        icons = self.theme.icons
        buffer = []
        if self.set_title:
            buffer.append(templates.set_title)
        if self.bold:
            buffer.append(templates.bold)
        n = len(segments)
        for i, segment in enumerate(segments):
            foreground = templates.foreground(segment.foreground)
            background = templates.background(segment.background)
            next_background = templates.reset if i + 1 == n else templates.background(segments[i + 1].background)
            parts = segment.sorted_parts()
            for j, part in enumerate(parts):
                text = powerprompt.util.escape(part.text) if part.requires_escaping else part.text
                buffer.append(f'{foreground}{background} {text} ')
                if j + 1 == len(parts):
                    buffer.append(f'{next_background}{templates.foreground(segment.background)}{icons.separator}')
                else:
                    buffer.append(f'{background}{foreground}{icons.separator_thin}')
        buffer.append(templates.reset)
        buffer.append(' ')
        return ''.join(buffer)
