"""
Evonet Population Module

This module implements the Population class, a reference evolutionary driver
for evonet networks. It owns one generation of networks and produces the next
one through elitism, truncation selection, crossover and mutation.

Classes:
    Population: A generation of networks evolving together
"""

import logging
import math
import numpy as np
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evonet.run.config import Config
from evonet.phenotype import NeuralNetwork, uniform_perturbation
from evonet.utils     import get_rng

logger = logging.getLogger(__name__)

class Population:
    """
    A population of evolving neural networks.

    All networks share the topology given by the configuration, so any two of
    them can be recombined. Fitness is assigned from outside (usually by a Trial)
    by setting each network's 'fitness' attribute.

    Public Attributes:
        networks: List of all NeuralNetwork objects in the current generation

    Public Methods:
        get_fittest_network():   Return the network with highest fitness
        mean_fitness():          Average fitness of the current generation
        spawn_next_generation(): Replace the networks by their offspring
    """

    def __init__(self, config: 'Config', rng: np.random.Generator | None = None):
        """
        Initialize the population with randomly initialized networks.

        Parameters:
            config: Stores configuration parameters
            rng:    Random generator (defaults to the process-scoped one)
        """
        self._config = config
        self._rng    = get_rng(rng)

        self.networks: list[NeuralNetwork] = [
            NeuralNetwork(config.input_nodes, config.hidden_nodes, config.output_nodes,
                          learning_rate=config.learning_rate,
                          activation=config.activation,
                          rng=self._rng)
            for _ in range(config.population_size)
        ]

    def get_fittest_network(self) -> NeuralNetwork | None:
        """
        Find and return the network with the highest fitness.

        Returns:
            The fittest network, or None if the population is empty
        """
        if not self.networks:
            return None
        return max(self.networks, key=lambda network: network.fitness)

    def mean_fitness(self) -> float:
        if not self.networks:
            return 0.0
        return sum(network.fitness for network in self.networks) / len(self.networks)

    def _select_parents(self, ranked: list[NeuralNetwork]) -> list[NeuralNetwork]:
        """Keep the fittest 'survival_threshold' fraction of the ranked networks (at least one)."""
        num_parents = max(1, math.ceil(len(ranked) * self._config.survival_threshold))
        return ranked[:num_parents]

    def spawn_next_generation(self):
        """
        Create the next generation.

        Step 1: Ranking
        - Sort the networks by decreasing fitness

        Step 2: Elitism
        - The 'elitism' fittest networks are copied unchanged

        Step 3: Reproduction
        - Parents are drawn (with replacement) among the fittest 'survival_threshold' fraction
        - Each offspring is the crossover of two parents, then mutated
        """
        ranked  = sorted(self.networks, key=lambda network: network.fitness, reverse=True)
        parents = self._select_parents(ranked)
        size    = self._config.population_size

        offspring = [NeuralNetwork.copy(network) for network in ranked[:self._config.elitism]]
        mutation  = uniform_perturbation(self._config.mutation_strength, self._rng)

        while len(offspring) < size:
            index_a, index_b = self._rng.integers(len(parents), size=2)
            child = NeuralNetwork.reproduce(parents[index_a], parents[index_b], self._rng)
            child = NeuralNetwork.mutate(child, mutation)
            offspring.append(child)

        logger.debug("Spawned %d networks from %d parents (%d elites)",
                     len(offspring), len(parents), min(self._config.elitism, len(ranked)))
        self.networks = offspring[:size]

    def __len__(self):
        return len(self.networks)

    def __str__(self):
        return '\n'.join(str(network) for network in self.networks)
