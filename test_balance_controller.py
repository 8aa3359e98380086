"""Tests for balance controller"""

from pytest import raises

from balance_controller import BalanceConfig, BalanceController, BalanceOutcome
from balancer import ScaleCycleError
from scale_parser import RejectedLine


def test_controller_init():
    """init should create controller with default config and empty input"""
    controller = BalanceController()

    assert controller.config == BalanceConfig()
    assert controller.get_input_text() == ""
    assert controller.get_current_outcome() is None


def test_generate():
    """generate should parse, balance and report the input text"""
    controller = BalanceController()
    controller.set_input_text("A,2,B\nB,1,3\n")

    outcome = controller.generate()

    assert isinstance(outcome, BalanceOutcome)
    assert outcome.records == ["A,5,0", "B,2,0"]
    assert outcome.rejected == []
    assert controller.get_current_outcome() is outcome


def test_generate_twice_does_not_rebalance():
    """repeated runs should start from freshly parsed scales"""
    controller = BalanceController()
    controller.set_input_text("Main,Sub,6\nSub,4,4\n")

    first = controller.generate()
    second = controller.generate()

    assert first.records == second.records == ["Main,0,3", "Sub,0,0"]
    assert second.scales["Sub"].mass == 9


def test_generate_reports_rejected_lines():
    controller = BalanceController()
    controller.set_input_text("# valid\nInvalid,,Invalid\nS1,5,S2\nS2,5,5\n")

    outcome = controller.generate()

    assert outcome.records == ["S1,6,0", "S2,0,0"]
    assert outcome.rejected == [RejectedLine(1, "Invalid,,Invalid")]


def test_set_input_text_clears_outcome():
    controller = BalanceController()
    controller.set_input_text("S,5,5")
    controller.generate()

    controller.set_input_text("S,1,5")

    assert controller.get_current_outcome() is None
    assert controller.get_report_lines() == ["S,4,0"]


def test_config_self_mass():
    """the configured self-mass should be used for every scale"""
    controller = BalanceController(BalanceConfig(scale_self_mass=0))
    controller.set_input_text("Main,Sub,6\nSub,4,4\n")

    assert controller.get_report_lines() == ["Main,0,2", "Sub,0,0"]


def test_config_validation():
    """invalid configurations should raise ValueError"""
    with raises(ValueError, match="Invalid self-mass"):
        BalanceConfig(scale_self_mass=-1).validate()
    with raises(ValueError, match="Comment prefix"):
        BalanceConfig(comment_prefix="").validate()
    with raises(ValueError, match="Invalid delimiter"):
        BalanceConfig(delimiter="").validate()
    with raises(ValueError, match="Invalid delimiter"):
        BalanceConfig(delimiter=" ").validate()
    with raises(ValueError, match="Invalid delimiter"):
        BalanceConfig(delimiter="1").validate()

    BalanceConfig(delimiter=";").validate()


def test_generate_with_invalid_config():
    controller = BalanceController(BalanceConfig(scale_self_mass=-2))
    controller.set_input_text("S,5,5")

    with raises(ValueError):
        controller.generate()


def test_generate_cycle():
    controller = BalanceController()
    controller.set_input_text("A,B,1\nB,A,1\n")

    with raises(ScaleCycleError):
        controller.generate()


def test_load_file(tmp_path):
    """load_file should read input text from disk"""
    path = tmp_path / "scales.txt"
    path.write_text("S,5,5\n", encoding="utf-8")

    controller = BalanceController()
    controller.load_file(str(path))

    assert controller.get_input_text() == "S,5,5\n"
    assert controller.get_report_lines() == ["S,0,0"]


def test_load_missing_file(tmp_path):
    controller = BalanceController()
    with raises(OSError):
        controller.load_file(str(tmp_path / "missing.txt"))


def test_save_report(tmp_path):
    """save_report should write one line per scale"""
    path = tmp_path / "report.txt"
    controller = BalanceController()
    controller.set_input_text("A,B,1\nB,C,2\nC,3,4\n")

    controller.save_report(str(path))

    assert path.read_text(encoding="utf-8") == "A,0,18\nB,0,7\nC,1,0\n"


def test_get_graphviz_source():
    controller = BalanceController()
    controller.set_input_text("S,5,5")

    source = controller.get_graphviz_source()

    assert "digraph" in source
    assert "mass 11" in source
