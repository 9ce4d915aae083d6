"""
EVENT HANDLERS - Domain event listeners

Listeners are async callables bound to event types at startup
(see officeops/setup/ioc/registrations.py). They run inside the unit of work's
transaction, after state has been written and before the store commits; a
failing listener rolls the write back.
"""
