#
# Copyright (c) 2024-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import html
import sys
import textwrap


from typing import Sequence, Any, TextIO
from abc import ABC, abstractmethod


class Report(ABC):

    def start(self, title:str) -> None:
        pass

    @abstractmethod
    def write_heading(self, heading:str, level:int=1) -> None:  # pragma: no cover
        raise NotImplementedError

    @abstractmethod
    def write_paragraph(self, paragraph:str) -> None:  # pragma: no cover
        raise NotImplementedError

    @abstractmethod
    def write_table(self, rows:Sequence[Sequence[Any]], header:Sequence[Any]|None=None, just:str|None=None, indent:str='') -> None:  # pragma: no cover
        raise NotImplementedError

    @staticmethod
    def format(field:Any) -> str:
        if field is None or field != field:
            return ''
        else:
            return str(field)

    def end(self) -> None:
        pass


class TextReport(Report):

    _just = {
        'c': str.center,
        'l': str.ljust,
        'r': str.rjust,
    }

    def __init__(self, stream:TextIO=sys.stdout):
        self.stream = stream
        self.heading_sep = ''

    def write_heading(self, heading:str, level:int=1) -> None:
        if level <= 1:
            heading = heading.upper()
        self.stream.write(self.heading_sep + heading + '\n\n')
        self.heading_sep = ''

    def write_paragraph(self, paragraph:str) -> None:
        paragraph = '\n'.join(textwrap.wrap(paragraph, width=80))
        self.stream.write(paragraph + '\n\n')
        self.heading_sep = '\n'

    def write_table(self, rows:Sequence[Sequence[Any]], header:Sequence[Any]|None=None, just:str|None=None, indent:str='') -> None:
        lines = [[self.format(field) for field in row] for row in rows]
        if header is not None:
            lines.insert(0, [self.format(field) for field in header])

        ncols = max(len(line) for line in lines)
        assert all(len(line) == ncols for line in lines)
        if just is None:
            just = 'l' * ncols
        assert len(just) == ncols

        widths = [max(len(line[c]) for line in lines) for c in range(ncols)]

        sep = '  '
        rule = '─' * (sum(widths) + len(sep) * (ncols - 1))

        for i, line in enumerate(lines):
            cells = [self._just[j](cell, width) for cell, j, width in zip(line, just, widths)]
            self.stream.write(indent + sep.join(cells).rstrip() + '\n')
            if i == 0 and header is not None:
                self.stream.write(indent + rule + '\n')
        self.stream.write('\n')

        self.heading_sep = '\n'


class HtmlReport(Report):

    _just = {
        'c': 'center',
        'l': 'left',
        'r': 'right',
    }

    def __init__(self, stream:TextIO):
        self.stream = stream

    def start(self, title:str) -> None:
        title = html.escape(title)
        self.stream.write(
            '<!doctype html>\n'
            '<html lang="pt">\n'
            '<head>\n'
            '<meta charset="utf-8">\n'
            f'<title>{title}</title>\n'
            '<style>body { font-family: monospace; } th, td { padding: 0.25em 1ch; }</style>\n'
            '</head>\n'
            '<body>\n'
            f'<h1>{title}</h1>\n'
        )

    def write_heading(self, heading:str, level:int=1) -> None:
        level += 1
        heading = html.escape(heading)
        self.stream.write(f'\n<h{level}>{heading}</h{level}>\n\n')

    def write_paragraph(self, paragraph:str) -> None:
        paragraph = html.escape(paragraph)
        self.stream.write(f'<p>{paragraph}</p>\n\n')

    def write_table(self, rows:Sequence[Sequence[Any]], header:Sequence[Any]|None=None, just:str|None=None, indent:str='') -> None:
        def cell(tag, field, j):
            align = self._just[j]
            return f'<{tag} style="text-align: {align}">{html.escape(self.format(field))}</{tag}>'

        if just is None:
            just = 'l' * len(rows[0] if rows else header or [])

        self.stream.write('<table>\n')
        if header:
            self.stream.write('<thead><tr>' + ''.join(cell('th', field, j) for field, j in zip(header, just)) + '</tr></thead>\n')
        self.stream.write('<tbody>\n')
        for row in rows:
            self.stream.write('<tr>' + ''.join(cell('td', field, j) for field, j in zip(row, just)) + '</tr>\n')
        self.stream.write('</tbody>\n')
        self.stream.write('</table>\n')

    def end(self) -> None:
        self.stream.write('</body>\n')
        self.stream.write('</html>\n')
