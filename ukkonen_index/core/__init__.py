'''Pure Python core of the suffix tree: storage, construction and queries.'''
