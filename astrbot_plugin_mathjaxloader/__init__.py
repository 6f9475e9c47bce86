"""
AstrBot MathJaxLoader 插件
"""
