import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from vwp48.models.file import VwpFile
from vwp48.viz import altitude_color, hodograph_title, plot_hodograph

from builders import vwp_message


def test_altitude_bands():
    assert altitude_color(0.5) == (220 / 255, 0.0, 220 / 255)
    assert altitude_color(2.0) == (1.0, 0.0, 0.0)
    assert altitude_color(5.9) == (0.0, 1.0, 0.0)
    assert altitude_color(8.0) == (1.0, 1.0, 0.0)
    assert altitude_color(12.0) == (0.0, 1.0, 1.0)


def test_plot_hodograph():
    f = VwpFile.from_binary(vwp_message())
    assert hodograph_title(f) == "VWP valid 04/13/2019 0100 UTC"
    ax = plot_hodograph(f)
    assert ax.get_title() == hodograph_title(f)
    # two speed rings (20, 40 kt) and one segment per adjacent pair
    assert len(ax.patches) == 2
    assert len(ax.lines) == 2 + 2
    plt.close("all")
