"""
Domain layer package.

Contains pure classification logic: taxonomy, failure shapes,
the classifier and its ports. This layer has ZERO external dependencies.
No framework imports, no IO.
"""
