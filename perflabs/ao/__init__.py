"""Ambient-occlusion ray tracer: scene geometry and rendering."""