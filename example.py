from lyu import computed, effect, reactive, ref


class Product:
    def __init__(self, quantity, price):
        self.quantity = quantity
        self.price = price


print("=== reactive ===")
product = reactive(Product(quantity=2, price=5))
total = 0


@effect
def update_total():
    global total
    total = product.quantity * product.price


print(f"total is: {product.quantity} * {product.price} = {total}")
product.quantity = 3
print(f"total is: {product.quantity} * {product.price} = {total}")
product.price = 4
print(f"total is: {product.quantity} * {product.price} = {total}")

print("=== ref ===")
sale_price = ref(0)
discounted_total = 0


@effect
def update_sale_price():
    sale_price.value = product.price * 0.9


@effect
def update_discounted_total():
    global discounted_total
    discounted_total = sale_price.value * product.quantity


print(f"discounted total is: {discounted_total:.2f}")
product.quantity = 2
product.price = 5
print(f"discounted total is: {discounted_total:.2f}")

print("=== computed ===")
computed_sale_price = computed(lambda: product.price * 0.9)
computed_total = computed(lambda: computed_sale_price.value * product.quantity)

print(f"computed total is: {computed_total.value:.2f}")
product.quantity = 3
print(f"computed total is: {computed_total.value:.2f}")
product.price = 4
print(f"computed total is: {computed_total.value:.2f}")

print("=== new attribute ===")
product.name = "shoes"
message = computed(lambda: "Buy some " + product.name)
print(message.value)
# reactivity lives on the proxy, not on individual attributes,
# so attributes added later are reactive as well
product.name = "clothes"
print(message.value)
