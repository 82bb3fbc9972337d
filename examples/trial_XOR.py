"""
XOR Problem Implementation for evonet

This module solves the classic XOR (exclusive OR) problem in two ways: by
evolving a population of networks, and by training a single network with
backpropagation.

The XOR Problem:
    XOR is a two-input, one-output boolean function where the output is True
    only when the inputs differ:
        Input (0, 0) → Output 0
        Input (0, 1) → Output 1
        Input (1, 0) → Output 1
        Input (1, 1) → Output 0

    The problem is not linearly separable, so it needs the hidden layer.

Fitness Function:
    Fitness = 4.0 - Σ(output - target)²

    Maximum fitness of 4.0 is achieved when all four XOR cases produce exact outputs.

Classes:
    Trial_XOR: Evolutionary trial for solving XOR

Functions:
    train_xor(config, epochs): Solve XOR with backpropagation only

Usage:
    python examples/trial_XOR.py --mode evolve
    python examples/trial_XOR.py --mode backprop --epochs 5000
"""

import argparse
import logging
from pathlib import Path

from evonet       import Config, NeuralNetwork, Trial
from evonet.utils import random_state, setup_logging

logger = logging.getLogger("examples.xor")

XOR_INPUTS  = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
XOR_OUTPUTS = [[0.0],      [1.0],      [1.0],      [0.0]]

def xor_table(network: NeuralNetwork) -> str:
    """Format the network's answers to the four XOR cases."""
    s  = "input         output   target  error\n"
    s += "------------------------------------\n"
    for inputs, target in zip(XOR_INPUTS, XOR_OUTPUTS):
        output = network.predict(inputs)[0]
        s += f"{inputs} -> {output:.4f}    {target[0]}   {abs(output - target[0]):.4f}\n"
    return s

class Trial_XOR(Trial):
    """
    Evolutionary trial for solving the XOR problem.

    Implemented Methods:
        _evaluate_fitness(network): Test network on all 4 XOR cases
        _final_report(): Display the XOR truth table of the fittest network
    """

    def _evaluate_fitness(self, network: NeuralNetwork) -> float:
        fitness = 4.0  # max possible fitness
        for inputs, expected_output in zip(XOR_INPUTS, XOR_OUTPUTS):
            error    = network.predict(inputs)[0] - expected_output[0]
            fitness -= error ** 2
        return fitness

    def _final_report(self):
        super()._final_report()
        logger.info("Fittest network:\n%s", xor_table(self._population.get_fittest_network()))

def train_xor(config: Config, epochs: int) -> NeuralNetwork:
    """
    Train one network on XOR with online backpropagation.

    Parameters:
        config: Supplies topology, learning rate, activation and seed
        epochs: Number of passes over the four XOR cases
    """
    if config.seed is not None:
        random_state.seed(config.seed)

    network = NeuralNetwork(config.input_nodes, config.hidden_nodes, config.output_nodes,
                            learning_rate=config.learning_rate,
                            activation=config.activation)

    for epoch in range(1, epochs + 1):
        for inputs, targets in zip(XOR_INPUTS, XOR_OUTPUTS):
            network.train(inputs, targets)

        if epoch % 1000 == 0:
            mse = sum((network.predict(inputs)[0] - targets[0]) ** 2
                      for inputs, targets in zip(XOR_INPUTS, XOR_OUTPUTS)) / len(XOR_INPUTS)
            logger.info("Epoch %05d: mean squared error %.6f", epoch, mse)

    return network

def main():
    parser = argparse.ArgumentParser(description='Solve XOR with evonet')
    parser.add_argument('--mode', choices=['evolve', 'backprop'], default='evolve',
                        help='Evolve a population or train a single network')
    parser.add_argument('--config', default=str(Path(__file__).parent / 'configs' / 'config_xor.ini'),
                        help='Path to the INI configuration file')
    parser.add_argument('--epochs', type=int, default=10000,
                        help='Training epochs in backprop mode')
    parser.add_argument('--num-jobs', type=int, default=1,
                        help='Number of parallel jobs for fitness evaluation')
    args = parser.parse_args()

    setup_logging()
    config = Config(args.config)

    if args.mode == 'evolve':
        trial = Trial_XOR(config)
        trial.run(num_jobs=args.num_jobs)
    else:
        network = train_xor(config, args.epochs)
        logger.info("Trained network:\n%s", xor_table(network))

if __name__ == '__main__':
    main()
