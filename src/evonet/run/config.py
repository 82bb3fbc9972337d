import configparser
import os
from evonet.activations import activations

class Config:

    @staticmethod
    def _parse_activation(raw_value: str) -> str:
        """
        Validate the name of an activation function.

        Parameters:
            raw_value: Name as read from the configuration file

        Returns:
            The stripped activation name
        """
        name = raw_value.strip()
        if name not in activations:
            raise ValueError(f"Invalid activation function '{name}' in configuration")
        return name

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config with defaults.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.input_nodes   = 2
            self.hidden_nodes  = 2
            self.output_nodes  = 1
            self.learning_rate = 0.15
            self.activation    = 'sigmoid'

            self.mutation_strength = 0.15

            self.population_size    = 50
            self.elitism            = 1
            self.survival_threshold = 0.5

            self.max_number_generations = 100
            self.fitness_threshold      = None

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

        # [NETWORK]

        # The number of nodes in the input, hidden and output layers.
        # Networks only recombine with networks of the same shape.
        self.input_nodes  = get_value('NETWORK', 'input_nodes' , int)
        self.hidden_nodes = get_value('NETWORK', 'hidden_nodes', int)
        self.output_nodes = get_value('NETWORK', 'output_nodes', int)

        # Step size of one backpropagation update. Must be > 0.
        self.learning_rate = get_value('NETWORK', 'learning_rate', float, default=0.15)

        # Activation function used by the hidden and output layers.
        # Options: sigmoid, tanh, relu, identity (see 'basic_activations.py').
        self.activation = self._parse_activation(get_value('NETWORK', 'activation', str, default='sigmoid'))

        # [MUTATION]

        # Every parameter of a mutated network is perturbed by
        # uniform noise in [-mutation_strength, mutation_strength).
        self.mutation_strength = get_value('MUTATION', 'mutation_strength', float, default=0.15)

        # [POPULATION]

        # The number of networks in each generation.
        self.population_size = get_value('POPULATION', 'population_size', int)

        # The number of most-fit networks preserved as-is
        # from one generation to the next.
        self.elitism = get_value('POPULATION', 'elitism', int, default=1)

        # The fraction of networks (the fittest ones) allowed to reproduce.
        self.survival_threshold = get_value('POPULATION', 'survival_threshold', float, default=0.5)

        # [TERMINATION]

        # The number of generations after which to stop the run.
        self.max_number_generations = get_value('TERMINATION', 'max_number_generations', int)

        # The fitness value which, when met or exceeded by the fittest
        # network, causes the run to end early. Use "None" to disable.
        self.fitness_threshold = get_value('TERMINATION', 'fitness_threshold', float, default=None)

        # [RANDOM]

        # Seed for the process-wide random generator. Use "None" for a random seed.
        self.seed = get_value('RANDOM', 'seed', int, default=None)

        self._validate()

    def _validate(self):
        if not 0.0 < self.survival_threshold <= 1.0:
            raise ValueError(f"survival_threshold must be in (0, 1], got {self.survival_threshold}")
        if self.population_size <= 0:
            raise ValueError(f"population_size must be positive, got {self.population_size}")
        if not 0 <= self.elitism <= self.population_size:
            raise ValueError(f"elitism must be between 0 and population_size, got {self.elitism}")
        if self.mutation_strength < 0:
            raise ValueError(f"mutation_strength must be non-negative, got {self.mutation_strength}")
