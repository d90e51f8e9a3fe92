[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "floodwatch"
version = "0.1.0"
description = "Rain and water-level alert station model: joystick-driven alert logic, LED and buzzer levels, and an SSD1306 framebuffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["flood", "alert", "rain", "water-level", "ssd1306", "oled", "framebuffer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Hydrology",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
floodwatch = "floodwatch.dashboard:main"

[tool.hatch.build.targets.wheel]
packages = ["floodwatch"]

[tool.pytest.ini_options]
addopts = "-ra"
