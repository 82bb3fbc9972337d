"""
Evonet Trial Module

This module defines the abstract base class for evolutionary trials with
built-in support for CPU-based parallelization using joblib.

A trial represents one independent run of the evolutionary algorithm, evolving
a population of networks through generations until a solution is found or the
maximum number of generations is reached.
"""

import logging
from abc    import ABC, abstractmethod
from joblib import Parallel, delayed

from evonet.phenotype  import NeuralNetwork
from evonet.pool       import Population
from evonet.run.config import Config
from evonet.utils      import random_state

logger = logging.getLogger(__name__)

class Trial(ABC):
    """
    Abstract base class for implementing an evolutionary trial.

    Subclasses must implement:
    - _evaluate_fitness(network): Evaluate fitness for a single network

    Subclasses can override:
    - _reset(): Reset trial-specific state (must call super()._reset())
    - _terminate(): Custom termination logic (default: max generations + fitness threshold)
    - _report_progress(): Progress report after each generation
    - _final_report(): Report at the end of the run

    Public Attributes:
        failed: False once the fitness threshold has been reached

    Public Methods:
        run(num_jobs): Execute a complete trial

    Parallelization of fitness evaluation:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self, config: Config, suppress_output: bool = False):
        """
        Initialize the trial.

        Parameters:
            config:          Configuration parameters
            suppress_output: If True, suppress progress and final reports
        """
        self._config            : Config            = config
        self._generation_counter: int               = 0
        self._population        : Population | None = None
        self._suppress_output   : bool              = suppress_output
        self.failed             : bool              = True

    @property
    def population(self) -> Population | None:
        return self._population

    @property
    def generation(self) -> int:
        return self._generation_counter

    def run(self, num_jobs: int = 1):
        """
        Run the trial.

        Resets the trial state and runs the evolutionary
        algorithm until the terminate condition is met.

        Parameters:
            num_jobs: Number of parallel processes for fitness evaluation
                      1 = serial (no parallelization)
                     -1 = use all available CPU cores
                     >1 = use specified number of processes
        """
        self._reset()

        self._population = Population(self._config)
        self._evaluate_fitness_all(num_jobs)

        if not self._suppress_output:
            self._report_progress()

        while not self._terminate():
            self._generation_counter += 1
            self._population.spawn_next_generation()
            self._evaluate_fitness_all(num_jobs)

            if not self._suppress_output:
                self._report_progress()

        if not self._suppress_output:
            self._final_report()

    def _reset(self):
        """
        Reset the trial state before starting a new run.
        Re-seeds the process-scoped random generator when the configuration fixes a seed.
        """
        if self._config.seed is not None:
            random_state.seed(self._config.seed)
        self._generation_counter = 0
        self._population = None
        self.failed = True

    @abstractmethod
    def _evaluate_fitness(self, network: NeuralNetwork) -> float:
        """
        Evaluate and return the fitness of a network.
        Higher fitness values mean a higher chance to reproduce.
        """
        pass

    def _evaluate_fitness_all(self, num_jobs: int = 1):
        """
        Evaluate the fitness of every network in the population.

        With num_jobs != 1 each network is evaluated in a joblib worker; workers
        receive copies of the networks, so only the returned fitness values are
        written back.
        """
        networks = self._population.networks

        if num_jobs == 1:
            fitnesses = [self._evaluate_fitness(network) for network in networks]
        else:
            fitnesses = Parallel(n_jobs=num_jobs)(
                delayed(self._evaluate_fitness)(network) for network in networks
            )

        for network, fitness in zip(networks, fitnesses):
            network.fitness = float(fitness)

    def _terminate(self) -> bool:
        """
        Decide whether the run should stop.

        Stops once the fittest network reaches 'fitness_threshold' (if set), which
        also marks the trial as successful, or after 'max_number_generations'.
        """
        threshold = self._config.fitness_threshold
        if threshold is not None:
            fittest = self._population.get_fittest_network()
            if fittest is not None and fittest.fitness >= threshold:
                self.failed = False
                return True

        return self._generation_counter >= self._config.max_number_generations

    def _report_progress(self):
        fittest = self._population.get_fittest_network()
        logger.info("Generation %04d: max fitness %.4f, mean fitness %.4f",
                    self._generation_counter, fittest.fitness, self._population.mean_fitness())

    def _final_report(self):
        fittest = self._population.get_fittest_network()
        if self.failed:
            logger.info("No network reached the fitness threshold after %d generations (best %.4f)",
                        self._generation_counter, fittest.fitness)
        else:
            logger.info("Solved in %d generations, fitness %.4f",
                        self._generation_counter, fittest.fitness)
