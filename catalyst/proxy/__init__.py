"""
Server-side image proxy.
"""

from catalyst.proxy.app import GenerateImageRequest, ProxySettings, create_app, run_proxy
