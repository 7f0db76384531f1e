"""
TSP Solver - Visualization Module
Plot annealed tours and the convergence of the best distance.
"""

import matplotlib.pyplot as plt
from typing import List, Optional

from tsp_core import Tour


class TSPVisualizer:
    """Visualize TSP tours and optimization progress."""

    def __init__(self, figsize=(12, 8)):
        self.figsize = figsize

    def _finish(self, fig, save_path: Optional[str], show: bool, label: str):
        plt.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=300, bbox_inches='tight')
            print(f"{label} saved to {save_path}")

        if show:
            plt.show()
        else:
            plt.close(fig)

    def plot_tour(
        self,
        tour: Tour,
        title: str = "TSP Tour",
        show_arrows: bool = True,
        save_path: str = None,
        show: bool = True
    ):
        """
        Plot a single tour.

        Args:
            tour: The tour to visualize
            title: Plot title
            show_arrows: Show direction arrows on edges
            save_path: Optional path to save the figure
            show: Open a window; otherwise the figure is closed after saving
        """
        fig, ax = plt.subplots(figsize=self.figsize)

        if len(tour) == 0:
            ax.text(0.5, 0.5, 'No cities in tour',
                    ha='center', va='center', fontsize=16)
            self._finish(fig, save_path, show, "Tour")
            return fig

        visited = [tour[i] for i in range(len(tour))]

        x_coords = [city.x for city in visited]
        y_coords = [city.y for city in visited]

        # Close the loop
        x_coords.append(visited[0].x)
        y_coords.append(visited[0].y)

        ax.scatter(x_coords[:-1], y_coords[:-1],
                   c='red', s=200, zorder=3, edgecolors='darkred', linewidth=2)
        ax.plot(x_coords, y_coords, 'b-', linewidth=2, alpha=0.6, zorder=1)

        # Label with the original city ids
        for city in visited:
            ax.annotate(str(city.id),
                        (city.x, city.y),
                        fontsize=9,
                        ha='center',
                        va='center',
                        color='white',
                        weight='bold')

        if show_arrows and len(visited) > 1:
            for i in range(len(visited)):
                start = visited[i]
                end = visited[(i + 1) % len(visited)]

                mid_x = (start.x + end.x) / 2
                mid_y = (start.y + end.y) / 2
                dx = end.x - start.x
                dy = end.y - start.y

                ax.annotate('',
                            xy=(mid_x + dx * 0.1, mid_y + dy * 0.1),
                            xytext=(mid_x - dx * 0.1, mid_y - dy * 0.1),
                            arrowprops=dict(arrowstyle='->',
                                            color='blue',
                                            lw=2,
                                            alpha=0.7))

        # Highlight start city
        ax.scatter([visited[0].x], [visited[0].y],
                   c='green', s=300, zorder=4,
                   marker='*', edgecolors='darkgreen', linewidth=2)

        distance = tour.get_total_distance()
        ax.set_title(f"{title}\nTotal Distance: {distance:.2f}",
                     fontsize=14, weight='bold')
        ax.set_xlabel('X Coordinate', fontsize=12)
        ax.set_ylabel('Y Coordinate', fontsize=12)
        ax.grid(True, alpha=0.3)
        ax.set_aspect('equal')

        self._finish(fig, save_path, show, "Tour")
        return fig

    def plot_convergence(
        self,
        history: List[float],
        title: str = "Convergence History",
        xlabel: str = "Iteration",
        ylabel: str = "Best Distance",
        interval: int = 1,
        optimum: Optional[float] = None,
        save_path: str = None,
        show: bool = True
    ):
        """
        Plot the convergence history of the annealing run.

        Args:
            history: Best distance sampled every ``interval`` iterations
            title: Plot title
            xlabel: X-axis label
            ylabel: Y-axis label
            interval: Iterations between two samples
            optimum: Known optimal distance, drawn as a reference line
            save_path: Optional path to save the figure
            show: Open a window; otherwise the figure is closed after saving
        """
        fig, ax = plt.subplots(figsize=(10, 6))

        iterations = [i * interval for i in range(len(history))]

        ax.plot(iterations, history, 'b-', linewidth=2, label='Best Distance')
        ax.fill_between(iterations, history, alpha=0.3)

        initial = history[0]
        final = history[-1]
        improvement = ((initial - final) / initial) * 100 if initial > 0 else 0.0

        ax.axhline(y=final, color='g', linestyle='--',
                   linewidth=1.5, label=f'Final: {final:.2f}')
        ax.axhline(y=initial, color='r', linestyle='--',
                   linewidth=1.5, label=f'Initial: {initial:.2f}')
        if optimum is not None:
            ax.axhline(y=optimum, color='k', linestyle=':',
                       linewidth=1.5, label=f'Optimum: {optimum:.2f}')

        ax.set_xlabel(xlabel, fontsize=12)
        ax.set_ylabel(ylabel, fontsize=12)
        ax.set_title(f"{title}\nImprovement: {improvement:.2f}%",
                     fontsize=14, weight='bold')
        ax.grid(True, alpha=0.3)
        ax.legend(loc='upper right', fontsize=10)

        self._finish(fig, save_path, show, "Convergence plot")
        return fig
