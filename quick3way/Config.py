SAMPLE_SEED = 20230101
MAX_SAMPLE_TIME_MS = 2000
SAMPLES_PER_CASE = 30
STATISTICS_NS = list(range(2, 10)) + list(range(10, 100, 10)) + list(range(100, 1001, 100))
DISTINCT_M = 3

MAX_TRACE_N = 200
TRACE_ROW_HEIGHT = 50
TRACE_CANVAS_WIDTH = 800
COLOR_OUTSIDE = "lightgray"
COLOR_EQUAL = "rgb(150, 35, 31)"
COLOR_ACTIVE = "black"

SORTING_ALGORITHM_I = 0
SAMPLER_NAME = "distinct values"
INPUT_M = 4
INPUT_N = 40
USER_STATE_STORAGE_TYPE = "session"
