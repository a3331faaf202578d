# okta_lifecycle/api/__init__.py

import os

class _API_Path:
    def root(self):
        return os.path.dirname(os.path.abspath(__file__))

    def okta(self):
        return os.path.join(self.root(), 'okta_api')
