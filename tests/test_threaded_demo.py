import io

from fsmkit.threaded_demo import TrafficLightApp, main


def test_run_demo_shows_standard_and_simple_cycles():
    out = io.StringIO()
    TrafficLightApp(input_stream=io.StringIO(""), stream=out).run_demo()
    text = out.getvalue()
    assert "=== Standard Traffic Light Demo ===" in text
    assert "=== Simple Traffic Light Demo ===" in text
    assert "Transition: CAR_GREEN --[TIME_EXPIRED]--> CAR_YELLOW" in text
    assert "Transition: CAR_YELLOW --[TIME_EXPIRED]--> WALK_PREP" in text
    assert "Transition: WALK_FINISH --[TIME_EXPIRED]--> CAR_RED_YELLOW" in text
    # Only the simple light goes from red straight back to green.
    assert text.count("Transition: CAR_RED --[TIME_EXPIRED]--> CAR_GREEN") == 1
    assert "Simple timer: 4s" in text


def test_demo_order_standard_before_simple():
    out = io.StringIO()
    TrafficLightApp(input_stream=io.StringIO(""), stream=out).run_demo()
    text = out.getvalue()
    assert text.index("Standard Traffic Light Demo") < text.index("Simple Traffic Light Demo")


def test_run_simulation_quits_on_q():
    out = io.StringIO()
    TrafficLightApp(input_stream=io.StringIO("q"), stream=out).run_simulation()
    text = out.getvalue()
    assert "Press any key for pedestrian button, 'q' to quit" in text
    assert text.rstrip().endswith("Simulation ended.")


def test_run_simulation_reports_button_press():
    out = io.StringIO()
    TrafficLightApp(input_stream=io.StringIO("x q"), stream=out).run_simulation()
    text = out.getvalue()
    assert "Pedestrian button pressed!" in text
    assert "Simulation ended." in text


def test_main_demo_choice(capsys):
    assert main(["1"]) == 0
    assert "=== Demo Mode ===" in capsys.readouterr().out


def test_main_invalid_choice_runs_simulation(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert main(["abc"]) == 0
    assert "Simulation ended." in capsys.readouterr().out


def test_main_prompts_for_choice(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "Enter choice (1 or 2): " in text
    assert "=== Demo Mode ===" in text