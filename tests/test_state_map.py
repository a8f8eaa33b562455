import logging

import plotly.graph_objects as go

from fars.analysis.locations import filter_state
from fars.plotting.state_map import STATE_ABBREVIATIONS, plot_state_map

from .conftest import ACCIDENTS_2013, ACCIDENTS_2015


def test_plot_state_map_layers():
    fig = plot_state_map(filter_state(ACCIDENTS_2013, 25), 25, 2013)

    assert isinstance(fig, go.Figure)
    boundary, points = fig.data
    assert boundary.type == "choropleth"
    assert tuple(boundary.locations) == ("MA",)
    assert points.type == "scattergeo"
    # rows 2 and 3 carry a sentinel and are not plotted
    assert len(points.lon) == 2
    assert list(points.lat) == [42.36, 42.5]


def test_plot_state_map_view_follows_points():
    fig = plot_state_map(filter_state(ACCIDENTS_2013, 25), 25, 2013)
    lon_range = fig.layout.geo.lonaxis.range
    lat_range = fig.layout.geo.lataxis.range

    assert lon_range[0] < -71.1 and lon_range[1] > -70.9
    assert lat_range[0] < 42.3 and lat_range[1] > 42.5


def test_plot_state_map_title_mentions_unlocated_rows():
    fig = plot_state_map(filter_state(ACCIDENTS_2013, 25), 25, 2013)
    assert "2013" in fig.layout.title.text
    assert "2 of 4 located" in fig.layout.title.text


def test_plot_state_map_without_boundary_for_territory():
    df = ACCIDENTS_2015.assign(STATE=43)
    fig = plot_state_map(df, 43, 2015)

    assert 43 not in STATE_ABBREVIATIONS
    assert [trace.type for trace in fig.data] == ["scattergeo"]


def test_plot_state_map_nothing_located_fits_bounds():
    df = ACCIDENTS_2015.iloc[[2]]
    fig = plot_state_map(df, 1, 2015)

    lon = fig.data[-1].lon
    assert lon is None or len(lon) == 0
    assert fig.layout.geo.fitbounds == "locations"


def test_plot_state_map_empty_is_noop(caplog):
    caplog.set_level(logging.INFO, logger="fars")
    fig = plot_state_map(ACCIDENTS_2013.iloc[0:0], 25, 2013)

    assert fig is None
    assert "no accidents to plot" in caplog.text


def test_state_abbreviations_cover_states_and_dc():
    assert len(STATE_ABBREVIATIONS) == 51
    assert STATE_ABBREVIATIONS[11] == "DC"
