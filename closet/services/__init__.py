"""Application services that sit between the API and the recommender."""
