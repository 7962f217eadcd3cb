from django.urls import path
from .views import HealthView, StringAnalyzerView, StringDetailView, NaturalLanguageFilterView

urlpatterns = [
    path('', HealthView.as_view(), name='health'),
    path('strings', StringAnalyzerView.as_view(), name='analyze_string'),
    path('strings/filter-by-natural-language',
         NaturalLanguageFilterView.as_view(), name='nl_filter'),
    # path converter so decoded values containing "/" still resolve
    path('strings/<path:value>', StringDetailView.as_view(), name='get_string'),
]
