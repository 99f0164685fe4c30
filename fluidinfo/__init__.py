"""A client for Fluidinfo, an online information storage and search platform.

Fluidinfo stores objects that anyone can tag with values.  This package
builds requests for its HTTP API and turns the responses into simple Python
values.  It's organised in layers:

 - L{fluidinfo.web} builds requests (URLs, payloads and headers), executes
   them with a transport and normalizes the responses.

 - L{fluidinfo.api} contains the helpers that compile simple declarative
   calls, such as queries and updates, into requests for the C{/values}
   endpoint, and flattens their results.

 - L{fluidinfo.session} ties everything together.  A L{Session} is bound to
   a Fluidinfo instance and, optionally, a user.

 - L{fluidinfo.application} loads configuration and sets up logging.

A session can be created with L{fluidinfo.application.createSession}::

    session = createSession('sandbox', username='user', password='secret')
    session.query(select=['fluiddb/about'], where='has user/rating > 7',
                  onSuccess=printObjects)
"""
