class Display:
    '''
    Character grid the calculator is shown on: expression on top, result on
    the bottom row.

    Nothing upstream truncates, so this does.
    '''

    COLUMNS = 16
    ROWS = 2

    def __init__(self, columns=None, rows=None):
        self.columns = columns or type(self).COLUMNS
        self.rows = rows or type(self).ROWS
        if self.rows < 2:
            raise ValueError('Need at least 2 rows, not {0}'.format(self.rows))

    def render(self, expression, result=''):
        '''
        Return the rows of the grid, each exactly columns wide.

        A long expression shows its end, where the typing happens. A long
        result shows its start.
        '''
        top = expression[-self.columns:] if expression else ''
        bottom = result[:self.columns]
        lines = [top.ljust(self.columns)]
        lines.extend(' ' * self.columns for _ in range(self.rows - 2))
        lines.append(bottom.rjust(self.columns))
        return lines
