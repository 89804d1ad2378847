"""📦 modules/ — Bounded contexts específicos de la librería

✨ Estado actual: marshaling/

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/        → Descriptores de tipo, cursor, errores y puertos
   • application/   → Shape dispatch, recorrido y casos de uso
   • infrastructure/→ Adaptadores concretos (struct, observabilidad)
"""
