"""Visualization tools for labeled point sets.

This module draws the output of the clustering engine using Plotly.

- `palette`: Label to color mapping (`label_colors`, `cluster_color`)
- `point`: Point set visualization (`scatter_points`)
- `circle`: Neighborhood circles (`scatter_circles`)
- `canvas`: Full labeled canvas (`scatter_labels`, `draw_labels`, `layout2d`)
"""

from .canvas import *
from .circle import *
from .palette import *
from .point import *
