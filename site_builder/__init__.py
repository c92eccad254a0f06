"""
Site Builder - Station List to README and HTML

Renders the station list into Markdown tables inside the README, then
renders the whole README into the marked section of the HTML page.
"""

__version__ = "1.0.0"
