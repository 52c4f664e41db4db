"""
Plotting of escape fields, and a minimal interactive viewer to explore the
Mandelbrot set.

To zoom in, use the zoom tool of the figure toolbar and then press
"Recalculate". The iteration budget can be changed in the text box next to
the button. "Back" and "Forward" step through previously computed views.
"""
import os

import mandelbrot.utilities.log as log
from mandelbrot import config
from mandelbrot.escape_time.escape_field import compute_escape_field
from mandelbrot.escape_time.grid import Region, ensure_region
from mandelbrot.mandelbrot_exceptions import InvalidRegion
from mandelbrot.viewer.contrast import adjust_contrast
from mandelbrot.viewer.view_history import View_history


class Escape_plotter(object):
    """
    A class to wrap an Escape_field for plotting and saving to png files.
    """

    def __init__(self, field, plot_dir=config.default_plot_dir):

        self.field = field
        self.region = field.region

        self.plot_dir = plot_dir
        self.make_plot_dir()

    def make_plot_dir(self, clobber=False):
        """
        Utility function to create a directory for storing a sequence of plot
        files, or if the directory already exists clear out any old plots.
        If clobber==False then it will abort instead of deleting existing files.
        """

        if self.plot_dir is None:
            return
        else:
            if os.path.isdir(self.plot_dir):
                if clobber:
                    for filename in os.listdir(self.plot_dir):
                        if filename.endswith('.png'):
                            os.remove(os.path.join(self.plot_dir, filename))
            else:
                os.mkdir(self.plot_dir)

    def default_filename(self):

        return 'mandelbrot_%g_%g_%g_%g.png' % tuple(self.region.as_extent())

    def _frame(self, figsize, dpi):

        import matplotlib.pyplot as plt

        field = self.field
        image = adjust_contrast(field.values, field.max_iter)

        fig = plt.figure(figsize=figsize, dpi=dpi)

        plt.title('Escape time: %d x %d, max_iter %d'
                  % (field.nx, field.ny, field.max_iter))
        plt.imshow(image,
                   origin='lower',
                   extent=self.region.as_extent(),
                   cmap=config.colormap,
                   vmin=0.0, vmax=1.0)
        plt.gca().set_aspect('equal')
        plt.xlabel('Re(c)')
        plt.ylabel('Im(c)')

        return fig

    def save_frame(self, filename=None, figsize=config.figsize,
                   dpi=config.dpi):
        """Save the image to a png file and return its path.

        Without a filename, a name is built from the region bounds.
        """

        import matplotlib.pyplot as plt

        if filename is None:
            filename = self.default_filename()

        if self.plot_dir is not None:
            filename = os.path.join(self.plot_dir, filename)

        fig = self._frame(figsize, dpi)
        fig.savefig(filename)
        plt.close(fig)

        return filename

    def plot_frame(self, figsize=config.figsize, dpi=config.dpi):

        import matplotlib.pyplot as plt

        self._frame(figsize, dpi)

        plt.show()


class Mandelbrot_viewer(object):
    """
    A matplotlib figure showing the escape field of the current view, with
    a "Recalculate" button, an iteration count entry and buttons to go back
    and forward through the views computed so far.
    """

    def __init__(self, region=None, n=None, max_iter=None, verbose=False):

        import matplotlib.pyplot as plt
        from matplotlib.widgets import Button, TextBox

        if region is None:
            region = config.default_region
        if n is None:
            n = config.default_n
        if max_iter is None:
            max_iter = config.default_max_iter

        self.n = n
        self.max_iter = max_iter
        self.verbose = verbose
        self.history = View_history()
        self.field = None

        self.fig = plt.figure(figsize=config.figsize, dpi=config.dpi)
        self.ax = self.fig.add_axes([0.08, 0.18, 0.88, 0.78])

        self.recalc_button = Button(self.fig.add_axes([0.08, 0.04, 0.2, 0.07]),
                                    'Recalculate')
        self.recalc_button.on_clicked(self._on_recalculate)

        self.iter_entry = TextBox(self.fig.add_axes([0.42, 0.04, 0.14, 0.07]),
                                  'Iterations ', initial=str(max_iter))

        self.back_button = Button(self.fig.add_axes([0.62, 0.04, 0.16, 0.07]),
                                  'Back')
        self.back_button.on_clicked(self._on_back)

        self.forward_button = Button(self.fig.add_axes([0.80, 0.04, 0.16, 0.07]),
                                     'Forward')
        self.forward_button.on_clicked(self._on_forward)

        self.show_region(region)

    # ------------------------------------------------------------------
    # Widget callbacks
    # ------------------------------------------------------------------
    def _on_recalculate(self, event):
        self.recalculate()

    def _on_back(self, event):
        self.undo_zoom()

    def _on_forward(self, event):
        self.redo_zoom()

    # ------------------------------------------------------------------
    # View handling
    # ------------------------------------------------------------------
    def current_view(self):
        """Region currently shown by the axes"""

        real_min, real_max = sorted(self.ax.get_xlim())
        imag_min, imag_max = sorted(self.ax.get_ylim())

        return Region(real_min, real_max, imag_min, imag_max)

    def read_max_iter(self):
        """Iteration budget from the text entry.

        An entry which is not a positive integer is reported and replaced
        by the previous value.
        """

        text = self.iter_entry.text.strip()
        try:
            max_iter = int(text)
        except ValueError:
            max_iter = 0

        if max_iter < 1:
            log.critical('Invalid iteration count "%s", keeping %d'
                         % (text, self.max_iter))
            self.iter_entry.set_val(str(self.max_iter))
            return self.max_iter

        self.max_iter = max_iter
        return max_iter

    def show_region(self, region):
        """Compute and display region, and add it to the history"""

        region = self.history.push(ensure_region(region))
        return self._draw(region)

    def recalculate(self):
        """Recompute the field for the region the axes are zoomed to"""

        if self.verbose:
            log.critical('Recalculating...')

        self.read_max_iter()

        try:
            region = self.current_view()
        except InvalidRegion as e:
            log.critical('Cannot recalculate: %s' % str(e))
            return self.field

        return self.show_region(region)

    def undo_zoom(self):
        """Go back to the previous region"""

        if not self.history.can_go_back():
            return self.field
        return self._draw(self.history.back())

    def redo_zoom(self):
        """Go forward to the region left by undo_zoom"""

        if not self.history.can_go_forward():
            return self.field
        return self._draw(self.history.forward())

    def _draw(self, region):

        field = compute_escape_field(region, self.n, self.max_iter,
                                     verbose=self.verbose)
        image = adjust_contrast(field.values, field.max_iter)

        ax = self.ax
        ax.cla()
        ax.imshow(image,
                  origin='lower',
                  extent=region.as_extent(),
                  cmap=config.colormap,
                  vmin=0.0, vmax=1.0)
        ax.set_xlim(region.real_min, region.real_max)
        ax.set_ylim(region.imag_min, region.imag_max)
        ax.set_aspect('equal')

        self.fig.canvas.draw_idle()

        self.field = field
        return field

    def show(self):

        import matplotlib.pyplot as plt

        plt.show()
