import configparser
import os

from evonet.errors import InvalidConfigError

class Config:

    @staticmethod
    def _parse_topology(raw_topology):
        """
        Parse topology from string to list.

        Parameters:
            raw_topology: Either a comma-separated list of layer widths, or already a list

        Returns:
            List of layer widths, inputs first
        """
        # If already a list, return as-is
        if isinstance(raw_topology, list):
            return raw_topology

        try:
            topology = [int(width.strip()) for width in raw_topology.split(',')]
        except ValueError:
            raise InvalidConfigError(f"Invalid topology '{raw_topology}'") from None

        if len(topology) < 2 or any(width < 1 for width in topology):
            raise InvalidConfigError(f"Invalid topology '{raw_topology}': need at least 2 positive widths")
        return topology

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding the defaults.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.population_size = 128
            self.topology        = [11, 24, 5]

            self.mutation_chance      = 0.3
            self.mutation_coefficient = 0.5

            self.max_number_generations    = 100
            self.fitness_termination_check = False
            self.fitness_criterion         = 'max'
            self.fitness_threshold         = None

            self.seed = None

            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [POPULATION_INIT]

        # The number of individuals in each generation.
        self.population_size = get_value('POPULATION_INIT', 'population_size', int)

        # The widths of the network layers, inputs first, e.g. "11, 24, 5".
        # Every individual in the population shares this topology.
        self.topology = self._parse_topology(get_value('POPULATION_INIT', 'topology', str))

        # [MUTATION]

        # The probability that any given gene is perturbed.
        # Must be in [0, 1].
        self.mutation_chance = get_value('MUTATION', 'mutation_chance', float)

        # The maximum magnitude of a gene perturbation.
        # Must be >= 0.
        self.mutation_coefficient = get_value('MUTATION', 'mutation_coefficient', float)

        # [TERMINATION]

        # The maximum number of generations a trial runs for.
        self.max_number_generations = get_value('TERMINATION', 'max_number_generations', int)

        # Whether to stop a trial early once the population fitness reaches a threshold.
        self.fitness_termination_check = get_value('TERMINATION', 'fitness_termination_check', bool, default=False)

        # How the fitness of the whole population is measured
        # when checking against the threshold. Allowed values:
        #   "max"  - fitness of the best individual
        #   "mean" - average fitness of the population
        self.fitness_criterion = get_value('TERMINATION', 'fitness_criterion', str, default='max')
        if self.fitness_criterion not in ('max', 'mean'):
            raise InvalidConfigError(f"Invalid fitness_criterion '{self.fitness_criterion}'")

        # The population fitness at which a trial is considered successful.
        # Required when fitness_termination_check is enabled, "None" otherwise.
        self.fitness_threshold = get_value('TERMINATION', 'fitness_threshold', float, default=None)
        if self.fitness_termination_check and self.fitness_threshold is None:
            raise InvalidConfigError("fitness_threshold is required when fitness_termination_check is enabled")

        # [RANDOM]

        # Seed of the random number generator driving a trial.
        # Use "None" for a non-reproducible run.
        self.seed = get_value('RANDOM', 'seed', int, default=None)
