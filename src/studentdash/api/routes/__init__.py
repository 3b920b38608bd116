"""REST routes for studentdash.

Every handler touching the DashboardSession is a coroutine, so all session
access runs on the event loop thread. The session is not thread-safe.
"""
