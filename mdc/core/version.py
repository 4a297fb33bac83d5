"""MDC - version constants.

Keep this module tiny and dependency-free. It is imported by core, geom and
UI modules and must not have side effects.
"""

APP_NAME = "MedidorCadena"
APP_SHORT = "MDC"

# App semantic version (must match pyproject.toml).
APP_VERSION = "0.1.0"

# Cadena inicial (coordenadas lógicas): cuadrado alineado a los ejes.
DEFAULT_POINTS = ((100.0, 100.0), (100.0, 900.0), (900.0, 900.0), (900.0, 100.0))

# Zoom por rueda: factor por evento + límites de escala del lienzo.
DEFAULT_ZOOM_STEP = 1.02
DEFAULT_MIN_SCALE = 0.01
DEFAULT_MAX_SCALE = 100.0

# Etiquetas de medición
DEFAULT_DISTANCE_UNIT = "cm"
DEFAULT_DISTANCE_DECIMALS = 0
DISTANCE_LABEL_OFFSET_Y = -20.0
ANGLE_LABEL_OFFSET_Y = -40.0
LABEL_FONT_SIZE = 15

# Marcadores de punto (radio lógico + relleno)
MARKER_RADIUS = 10.0
MARKER_RADIUS_SELECTED = 12.0
MARKER_FILL = "red"
MARKER_FILL_SELECTED = "green"

# Segmentos + hoja de fondo
SEGMENT_STROKE = "black"
SEGMENT_STROKE_WIDTH = 4.0
LABEL_FILL = "black"
SHEET_FILL = "#f9f9f9"
