# runtime/hooks.py


class NoopHooks:
    def compute_start(self, **_):
        pass

    def compute_end(self, **_):
        pass

    def error(self, *_, **__):
        pass
