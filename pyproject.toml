[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsmkit"
version = "1.0.0"
description = "Runtime-configurable finite state machines with controllers, observers and traffic light and elevator simulations"
requires-python = ">=3.10"
dependencies = []
keywords = ["state machine", "fsm", "observer", "traffic light", "elevator", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fsmkit-traffic = "fsmkit.traffic_demo:main"
fsmkit-elevator = "fsmkit.elevator_demo:main"
fsmkit-traffic-threaded = "fsmkit.threaded_demo:main"
fsmkit-traffic-observer = "fsmkit.observer_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["fsmkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
