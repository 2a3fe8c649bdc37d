# Fraction of the class-separation radii kept (1.0 keeps every point)
DEFAULT_QUANTILE = 0.05

# Margin removed from the nearest opposite-class distance
DEFAULT_EPSILON = 1e-7

# Number of sample prefixes assessed by the hyperplane estimator
DEFAULT_LENGTH = 20

# Smallest sample accepted by the hyperplane estimator
MIN_SAMPLE_SIZE = 100

# Smallest prefix evaluated, and the minimal rows per prefix step
MIN_PREFIX_SIZE = 10

# Rows per nearest-neighbor query batch
DEFAULT_BATCH_SIZE = 100000

# Behavior when epsilon pushes a radius below zero: 'warn' or 'raise'
NEGATIVE_RADIUS_ACTIONS = ('warn', 'raise')
DEFAULT_NEGATIVE_RADIUS = 'warn'

ESTIMATION_COLUMNS = ['n', 'reduced', 'big_omega', 'big_o']
SHATTERING_COLUMNS = ['lower_bound', 'upper_bound']
