from django.apps import AppConfig


class StringAnalyzerConfig(AppConfig):
    name = 'string_analyzer'
    verbose_name = 'String Analyzer'

    def ready(self):
        from .store import ContentStore

        # one store per process, handed to the views
        self.store = ContentStore()
