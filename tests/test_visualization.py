from tsp_core import Tour
from visualization import TSPVisualizer


def test_plot_tour_saves_figure(tmp_path, square_cities):
    path = tmp_path / "tour.png"
    fig = TSPVisualizer(figsize=(4, 4)).plot_tour(
        Tour([0, 1, 2, 3], square_cities), save_path=str(path), show=False
    )
    assert path.exists()
    assert "4.00" in fig.axes[0].get_title()


def test_plot_empty_tour(tmp_path, square_cities):
    path = tmp_path / "empty.png"
    TSPVisualizer(figsize=(4, 4)).plot_tour(Tour([], square_cities), save_path=str(path), show=False)
    assert path.exists()


def test_plot_convergence_with_optimum(tmp_path):
    path = tmp_path / "conv.png"
    fig = TSPVisualizer().plot_convergence(
        [10.0, 8.0, 5.0, 4.0], interval=1000, optimum=4.0, save_path=str(path), show=False
    )
    assert path.exists()
    labels = [line.get_label() for line in fig.axes[0].get_lines()]
    assert "Optimum: 4.00" in labels
