"""wifimatrix -- LAN web server for the 8x8 WiFi matrix control panel.

Serves the static control panel page to the host and to phones or
laptops on the same network, and prints the URLs to reach it. The
matrix itself is driven by its own firmware; the page talks to it
directly from the browser.
"""

__version__ = "0.1.0"
