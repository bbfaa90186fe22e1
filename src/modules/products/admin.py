from django.contrib import admin

from modules.products.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "price", "availability", "updated_at")
    list_filter = ("availability",)
    search_fields = ("name",)
    ordering = ("-id",)
