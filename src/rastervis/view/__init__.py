"""
The VIEW layer: Qt widgets and the renderer.
Widgets emit signals; the main window connects them to the controller.
"""
