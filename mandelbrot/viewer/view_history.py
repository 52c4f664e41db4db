"""History of regions visited by the viewer, for undoing and redoing zooms
"""

from mandelbrot.escape_time.grid import ensure_region


class View_history(object):
    """Ordered list of regions with a cursor at the region on display.

    Pushing a new region after stepping back discards the regions that
    were ahead of the cursor, as in a web browser.
    """

    def __init__(self, region=None):

        self.regions = []
        self.index = -1

        if region is not None:
            self.push(region)

    def __len__(self):
        return len(self.regions)

    def current(self):
        """Region on display, or None if the history is empty"""

        if self.index < 0:
            return None
        return self.regions[self.index]

    def push(self, region):
        """Make region the current one. A repeat of the current region is
        ignored.

        Returns the current region.
        """

        region = ensure_region(region)

        if region == self.current():
            return region

        del self.regions[self.index + 1:]
        self.regions.append(region)
        self.index = len(self.regions) - 1

        return region

    def can_go_back(self):
        return self.index > 0

    def can_go_forward(self):
        return self.index < len(self.regions) - 1

    def back(self):
        """Step to the previous region and return it (undo zoom).

        At the start of the history the current region is returned.
        """

        if self.can_go_back():
            self.index -= 1
        return self.current()

    def forward(self):
        """Step to the next region and return it (redo zoom)"""

        if self.can_go_forward():
            self.index += 1
        return self.current()
