"""
Generators: derive builder method contracts from a capability model.

``synthesize()`` returns the ordered list of ``MethodEntry`` instances;
``synthesize_contract()`` wraps them in a ``BuilderContract``.
"""
