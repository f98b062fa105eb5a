"""
Change notification for SweetLogic managers
Views subscribe a refresh callback and redraw after every mutation
"""


class ChangeNotifier:
    def __init__(self):
        self._listeners = []

    def subscribe(self, listener):
        """Register a callback invoked with no arguments after each change"""
        if listener not in self._listeners:
            self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self):
        # Copy so a listener may unsubscribe itself while being called
        for listener in list(self._listeners):
            listener()
