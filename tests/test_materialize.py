import matplotlib.pyplot as plt
import pytest
from matplotlib.layout_engine import ConstrainedLayoutEngine, TightLayoutEngine

from errors import InvalidTargetError
from geometry import AxisGeometry, Inset
from materialize import (
    AxisTarget,
    FigureTarget,
    duplicate_figure,
    isolate_axis,
    materialize,
    resolve_target,
    working_figure,
)
from export_utils import save_figure
from helpers import cm_to_inch


def test_resolve_target_variants(two_axes_fig):
    ax = two_axes_fig.axes[1]
    assert resolve_target(two_axes_fig) == FigureTarget(two_axes_fig)
    assert resolve_target(ax) == AxisTarget(ax)
    assert resolve_target(two_axes_fig.number) == FigureTarget(two_axes_fig)
    assert resolve_target(None) == FigureTarget(plt.gcf())


@pytest.mark.parametrize("bad", ["figure", 3.5, [1, 2], True])
def test_resolve_target_rejects_other_objects(bad):
    with pytest.raises(InvalidTargetError):
        resolve_target(bad)


def test_resolve_target_rejects_unknown_figure_number():
    with pytest.raises(InvalidTargetError, match="No open figure"):
        resolve_target(9999)


def test_duplicate_shares_no_state(parabola_fig):
    copy = duplicate_figure(parabola_fig)
    assert copy is not parabola_fig

    copy.axes[0].get_lines()[0].set_linewidth(7)
    copy.set_size_inches(1, 1)

    assert parabola_fig.axes[0].get_lines()[0].get_linewidth() != 7
    assert parabola_fig.get_size_inches() == pytest.approx((cm_to_inch(12), cm_to_inch(9)))


def test_materialize_figure_keeps_all_axes(two_axes_fig):
    work = materialize(FigureTarget(two_axes_fig))
    assert work is not two_axes_fig
    assert len(work.axes) == 2


def test_materialize_axis_builds_single_axes_figure(two_axes_fig):
    bottom = two_axes_fig.axes[1]
    work = materialize(AxisTarget(bottom))

    assert len(work.axes) == 1
    assert work.axes[0].get_xlabel() == "t"
    # figure shrunk to the axes' outer box
    assert work.get_size_inches()[1] < two_axes_fig.get_size_inches()[1]
    # caller's figure untouched
    assert len(two_axes_fig.axes) == 2


def test_working_figure_closes_on_error(parabola_fig):
    work = duplicate_figure(parabola_fig)
    num = work.number
    assert plt.fignum_exists(num)

    with pytest.raises(RuntimeError):
        with working_figure(work):
            raise RuntimeError("boom")

    assert not plt.fignum_exists(num)


def test_isolate_axis_strips_chrome_and_sizes_exactly(two_axes_fig):
    geometry = AxisGeometry(width_cm=7.5, height_cm=4.0, inset=Inset(0, 0, 0, 0))
    xlim = two_axes_fig.axes[0].get_xlim()

    iso = isolate_axis(two_axes_fig, 0, geometry)

    assert len(iso.axes) == 1
    ax = iso.axes[0]
    assert iso.get_size_inches() == pytest.approx((cm_to_inch(7.5), cm_to_inch(4.0)))
    assert ax.get_position().bounds == pytest.approx((0, 0, 1, 1))
    assert not ax.axison
    assert not ax.patch.get_visible()
    assert ax.get_title() == ""
    assert ax.get_xlim() == pytest.approx(xlim)
    assert len(ax.get_lines()) == 2
    # source keeps its decorations
    assert two_axes_fig.axes[0].get_title() == "Top"
    assert two_axes_fig.axes[0].axison


def _tight_two_axes():
    fig, (top, bottom) = plt.subplots(2, 1, layout="tight")
    top.plot([0, 1], [0, 1])
    top.set_title("Top")
    bottom.plot([0, 1], [1, 0])
    bottom.set_xlabel("t")
    return fig


def test_materialize_drops_layout_engine():
    fig = _tight_two_axes()
    work = materialize(FigureTarget(fig))
    assert not isinstance(work.get_layout_engine(), (TightLayoutEngine, ConstrainedLayoutEngine))
    assert isinstance(fig.get_layout_engine(), TightLayoutEngine)

    single = materialize(AxisTarget(fig.axes[1]))
    assert not isinstance(single.get_layout_engine(), (TightLayoutEngine, ConstrainedLayoutEngine))


def test_isolated_axis_fills_page_after_save_with_tight_layout(tmp_path):
    fig = _tight_two_axes()
    geometry = AxisGeometry(width_cm=7.5, height_cm=4.0, inset=Inset(0, 0, 0, 0))

    iso = isolate_axis(fig, 0, geometry)
    save_figure(iso, tmp_path / "a.pdf", transparent=True)

    assert iso.axes[0].get_position().bounds == pytest.approx((0, 0, 1, 1))


def test_isolated_axis_fills_page_with_autolayout_rc(tmp_path):
    with plt.rc_context({"figure.autolayout": True}):
        fig, ax = plt.subplots()
        ax.plot([0, 1], [0, 1])
    geometry = AxisGeometry(width_cm=5.0, height_cm=5.0, inset=Inset(0, 0, 0, 0))

    iso = isolate_axis(fig, 0, geometry)
    iso.canvas.draw()

    assert iso.axes[0].get_position().bounds == pytest.approx((0, 0, 1, 1))
