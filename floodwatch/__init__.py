"""Flood-alert station model: alert logic, LED and buzzer levels, and an SSD1306 framebuffer."""

__version__ = "0.1.0"
__all__ = ["alerts", "dashboard", "font", "ssd1306"]