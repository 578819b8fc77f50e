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

import shlex

import powerprompt.theme

BASH = '''\
function _update_ps1() {{
    PS1="$({program} bash $? 2> /dev/null)"
}}

if [ "$TERM" != "linux" ]; then
    PROMPT_COMMAND="_update_ps1; $PROMPT_COMMAND"
fi
'''

ZSH = '''\
function powerprompt_precmd() {{
    PS1="$({program} zsh $? 2> /dev/null)"
}}

function install_powerprompt_precmd() {{
    for s in "${{precmd_functions[@]}}"; do
        if [ "$s" = "powerprompt_precmd" ]; then
            return
        fi
    done
    precmd_functions+=(powerprompt_precmd)
}}

if [ "$TERM" != "linux" ]; then
    install_powerprompt_precmd
fi
'''

SNIPPETS = {
    'bash': BASH,
    'zsh': ZSH
}


# Shell code, to be added to .bashrc or .zshrc, which runs program to compute the prompt
# before each prompt is displayed.
def snippet(shell, program):
    templates = powerprompt.theme.ShellTemplates.for_shell(shell)
    return SNIPPETS[templates.shell].format(program=shlex.quote(program))
