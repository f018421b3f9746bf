"""Task API application"""
