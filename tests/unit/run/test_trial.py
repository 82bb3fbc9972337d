"""
Unit tests for the Trial base class.
"""

import logging
import pytest
from evonet import Config, NeuralNetwork, Trial


class ConstantTrial(Trial):
    """Every network gets the sum of its outputs for a fixed input."""

    def _evaluate_fitness(self, network: NeuralNetwork) -> float:
        return sum(network.predict([1.0] * network.input_nodes))


class CountingTrial(ConstantTrial):
    """Records how often each hook is called."""

    def __init__(self, config, suppress_output=False):
        super().__init__(config, suppress_output)
        self.progress_reports = 0
        self.final_reports    = 0

    def _report_progress(self):
        super()._report_progress()
        self.progress_reports += 1

    def _final_report(self):
        super()._final_report()
        self.final_reports += 1


@pytest.fixture
def config():
    config = Config()
    config.input_nodes            = 2
    config.hidden_nodes           = 3
    config.output_nodes           = 1
    config.population_size        = 8
    config.elitism                = 1
    config.max_number_generations = 3
    config.seed                   = 99
    return config


class TestTrialRun:

    def test_runs_max_number_generations(self, config):
        trial = ConstantTrial(config, suppress_output=True)
        trial.run()
        assert trial.generation == 3
        assert trial.failed
        assert len(trial.population) == config.population_size

    def test_fitness_is_assigned(self, config):
        trial = ConstantTrial(config, suppress_output=True)
        trial.run()
        for network in trial.population.networks:
            assert network.fitness == pytest.approx(sum(network.predict([1.0, 1.0])))

    def test_fitness_threshold_stops_early(self, config):
        config.fitness_threshold = 0.0   # sigmoid outputs are always positive
        trial = ConstantTrial(config, suppress_output=True)
        trial.run()
        assert trial.generation == 0
        assert not trial.failed

    def test_best_fitness_never_decreases_with_elitism(self, config):
        config.max_number_generations = 1

        class RecordingTrial(ConstantTrial):
            best = []
            def _report_progress(self):
                self.best.append(self._population.get_fittest_network().fitness)

        trial = RecordingTrial(config)
        trial.run()
        assert len(trial.best) == 2
        assert trial.best[1] >= trial.best[0]

    def test_seed_makes_runs_reproducible(self, config):
        first = ConstantTrial(config, suppress_output=True)
        first.run()
        second = ConstantTrial(config, suppress_output=True)
        second.run()
        assert [n.parameters for n in first.population.networks] == \
               [n.parameters for n in second.population.networks]

    def test_parallel_evaluation_matches_serial(self, config):
        serial = ConstantTrial(config, suppress_output=True)
        serial.run(num_jobs=1)
        parallel = ConstantTrial(config, suppress_output=True)
        parallel.run(num_jobs=2)
        assert [n.fitness for n in serial.population.networks] == \
               pytest.approx([n.fitness for n in parallel.population.networks])


class TestTrialReporting:

    def test_reports_are_called(self, config):
        trial = CountingTrial(config)
        trial.run()
        assert trial.progress_reports == config.max_number_generations + 1
        assert trial.final_reports == 1

    def test_suppress_output(self, config):
        trial = CountingTrial(config, suppress_output=True)
        trial.run()
        assert trial.progress_reports == 0
        assert trial.final_reports == 0

    def test_progress_is_logged(self, config, caplog):
        with caplog.at_level(logging.INFO, logger="evonet.run.trial"):
            ConstantTrial(config).run()
        assert "Generation 0000" in caplog.text
        assert "No network reached the fitness threshold" in caplog.text

    def test_abstract(self, config):
        with pytest.raises(TypeError):
            Trial(config)
