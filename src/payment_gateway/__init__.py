"""payment-gateway: validate charge requests and dispatch them to payment circuits."""
